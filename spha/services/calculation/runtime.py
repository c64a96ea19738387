"""Runtime hierarchy: a hierarchy definition bound to one run's raw values.

Binding walks the definition top-down. For every child edge whose target
type has raw values, one raw-value leaf is created per value and the edge
weight is split evenly among them; the definition's own sub-tree below
that child is not visited. Children without raw values are bound
recursively and keep their declared weight.

Runtime nodes and edges are immutable and compare by identity, so they
can key the evaluator's result maps directly.
"""

from __future__ import annotations

import uuid
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from spha.domain.models.hierarchy import KpiNode
from spha.domain.models.kpi import KpiStrategyId, MetaInfo, RawValueKpi, Threshold
from spha.domain.models.results import CalculationResult, Empty, Success


@dataclass(frozen=True, eq=False)
class HierarchyNode:
    """Node of a runtime hierarchy.

    Attributes:
        type_id: KPI type of the node
        strategy: Strategy used to fold the children (RAW_VALUE for leaves)
        edges: Outgoing edges, in definition order
        id: Raw value id for bound leaves, a fresh uuid otherwise
        initial_result: Result known before evaluation (the raw score)
    """

    type_id: str
    strategy: KpiStrategyId
    edges: Tuple["HierarchyEdge", ...] = ()
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    origin_id: Optional[str] = None
    display_name: Optional[str] = None
    thresholds: Tuple[Threshold, ...] = ()
    meta_info: Optional[MetaInfo] = None
    initial_result: CalculationResult = field(default_factory=Empty)

    def __repr__(self) -> str:
        return f"HierarchyNode({self.type_id}, {self.strategy.name}, {self.initial_result!r})"


@dataclass(frozen=True, eq=False)
class HierarchyEdge:
    """Edge to a child node with the weight planned at bind time."""

    to: HierarchyNode
    planned_weight: float


def bind(definition: KpiNode, raw_values: Iterable[RawValueKpi]) -> HierarchyNode:
    """Bind a hierarchy definition to a set of raw KPI values.

    Args:
        definition: Root node of the hierarchy definition
        raw_values: Observations of this run, in any order

    Returns:
        Root of a freshly built runtime hierarchy
    """
    values_by_type: Dict[str, List[RawValueKpi]] = defaultdict(list)
    for raw_value in raw_values:
        values_by_type[raw_value.type_id].append(raw_value)

    return _bind_node(definition, values_by_type)


def _bind_node(
    node: KpiNode, values_by_type: Dict[str, List[RawValueKpi]]
) -> HierarchyNode:
    edges: List[HierarchyEdge] = []

    for child in node.edges:
        raw_values = values_by_type.get(child.target.type_id, [])
        if raw_values:
            weight = child.weight / len(raw_values)
            for raw_value in raw_values:
                edges.append(
                    HierarchyEdge(
                        to=_raw_value_leaf(child.target, raw_value),
                        planned_weight=weight,
                    )
                )
        else:
            edges.append(
                HierarchyEdge(
                    to=_bind_node(child.target, values_by_type),
                    planned_weight=child.weight,
                )
            )

    return HierarchyNode(
        type_id=node.type_id,
        strategy=node.strategy,
        edges=tuple(edges),
        display_name=node.display_name,
        thresholds=tuple(node.thresholds),
        meta_info=node.meta_info,
    )


def _raw_value_leaf(definition: KpiNode, raw_value: RawValueKpi) -> HierarchyNode:
    # A raw observation always wins over the definition's declared strategy
    return HierarchyNode(
        type_id=definition.type_id,
        strategy=KpiStrategyId.RAW_VALUE,
        id=raw_value.id,
        origin_id=raw_value.origin_id,
        display_name=definition.display_name,
        thresholds=tuple(definition.thresholds),
        meta_info=definition.meta_info,
        initial_result=Success(score=raw_value.score),
    )


def depth_first_traversal(
    node: HierarchyNode, seen: Optional[Set[HierarchyNode]] = None
) -> Iterator[HierarchyNode]:
    """Yield nodes in post-order (children before parents).

    A node already in ``seen`` is skipped, so shared or cyclic references
    are visited once.
    """
    if seen is None:
        seen = set()
    if node in seen:
        return
    seen.add(node)

    for edge in node.edges:
        yield from depth_first_traversal(edge.to, seen)

    yield node
