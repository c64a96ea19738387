"""Bottom-up evaluation of a runtime hierarchy.

The evaluator visits the runtime tree once in post-order. Raw value leaves
go through the raw value transformer; every other node is folded by the
strategy registered for its strategy id, using the results already computed
for its children. Nothing is mutated: results and actual edge weights are
collected in maps keyed by node and edge identity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from spha.domain.models.kpi import KpiStrategyId
from spha.domain.models.results import (
    CalculationResult,
    KpiResultEdge,
    KpiResultHierarchy,
    KpiResultNode,
)
from spha.services.calculation.runtime import (
    HierarchyEdge,
    HierarchyNode,
    depth_first_traversal,
)
from spha.services.calculation.strategies import (
    ChildResult,
    get_kpi_calculation_strategy,
)
from spha.services.calculation.transformation import RawValueTransformer


@dataclass
class Evaluation:
    """Outcome of evaluating one runtime hierarchy."""

    root: HierarchyNode
    results: Dict[HierarchyNode, CalculationResult] = field(default_factory=dict)
    actual_weights: Dict[HierarchyEdge, float] = field(default_factory=dict)

    @property
    def root_result(self) -> CalculationResult:
        return self.results[self.root]

    def result_of(self, node: HierarchyNode) -> CalculationResult:
        return self.results[node]

    def actual_weight_of(self, edge: HierarchyEdge) -> float:
        return self.actual_weights.get(edge, 0.0)


def calculate_node(
    node: HierarchyNode,
    evaluation: Evaluation,
    strict: bool = False,
    transformer: Optional[RawValueTransformer] = None,
) -> CalculationResult:
    """Compute one node whose children are already in ``evaluation``.

    Records the actual weights of the node's edges as a side product.
    """
    if node.strategy == KpiStrategyId.RAW_VALUE:
        transformer = transformer or RawValueTransformer()
        for edge in node.edges:
            evaluation.actual_weights[edge] = 0.0
        return transformer.transform(node)

    children = [
        ChildResult(
            planned_weight=edge.planned_weight,
            result=evaluation.results.get(edge.to, edge.to.initial_result),
        )
        for edge in node.edges
    ]
    outcome = get_kpi_calculation_strategy(node.strategy).calculate(children, strict)

    for edge, weight in zip(node.edges, outcome.actual_weights):
        evaluation.actual_weights[edge] = weight

    return outcome.result


def evaluate(
    root: HierarchyNode,
    strict: bool = False,
    transformer: Optional[RawValueTransformer] = None,
) -> Evaluation:
    """Evaluate a runtime hierarchy bottom-up in a single pass.

    Args:
        root: Root of a bound runtime hierarchy
        strict: Strict structural checks in the strategies
        transformer: Raw value transformer (default: configured technical lag family)

    Returns:
        Evaluation holding every node's result and every edge's actual weight
    """
    transformer = transformer or RawValueTransformer()
    evaluation = Evaluation(root=root)

    for node in depth_first_traversal(root):
        evaluation.results[node] = calculate_node(node, evaluation, strict, transformer)

    return evaluation


def to_result_node(node: HierarchyNode, evaluation: Evaluation) -> KpiResultNode:
    """Convert an evaluated runtime node (and its sub-tree) to a result node."""
    return KpiResultNode(
        type_id=node.type_id,
        strategy=node.strategy,
        result=evaluation.results.get(node, node.initial_result),
        id=node.id,
        origin_id=node.origin_id,
        display_name=node.display_name,
        thresholds=list(node.thresholds),
        meta_info=node.meta_info,
        edges=[
            KpiResultEdge(
                target=to_result_node(edge.to, evaluation),
                planned_weight=edge.planned_weight,
                actual_weight=evaluation.actual_weight_of(edge),
            )
            for edge in node.edges
        ],
    )


def to_result_hierarchy(evaluation: Evaluation) -> KpiResultHierarchy:
    """Snapshot an evaluation as a serializable result hierarchy."""
    return KpiResultHierarchy.create(to_result_node(evaluation.root, evaluation))
