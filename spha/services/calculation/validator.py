"""Pre-flight structural checks for hierarchy definitions.

Validation is advisory: the evaluator never consults it, and an invalid
hierarchy still evaluates (structural problems become Error results).

Rules:
    both modes:  RAW_VALUE nodes have no edges
    strict only: the root and every aggregation node have edges, and each
                 node satisfies its strategy's structural check (exactly two
                 edges for WEIGHTED_RATIO and XOR)
"""

from dataclasses import dataclass, field
from typing import List, Union

from spha.domain.models.hierarchy import KpiHierarchy, KpiNode
from spha.domain.models.kpi import KpiStrategyId
from spha.services.calculation.strategies import get_kpi_calculation_strategy


@dataclass(frozen=True)
class ValidationIssue:
    """One offending node, addressed by the type ids from the root."""

    path: str
    type_id: str
    message: str


@dataclass
class ValidationReport:
    strict: bool
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.issues


class HierarchyValidator:
    """Checks that every node's strategy is structurally satisfiable."""

    @classmethod
    def validate(
        cls, hierarchy: Union[KpiHierarchy, KpiNode], strict: bool = False
    ) -> ValidationReport:
        root = hierarchy.root if isinstance(hierarchy, KpiHierarchy) else hierarchy
        report = ValidationReport(strict=strict)

        if strict and not root.edges:
            report.issues.append(
                ValidationIssue(
                    path=root.type_id,
                    type_id=root.type_id,
                    message="Hierarchy is empty",
                )
            )

        cls._validate_node(root, root.type_id, strict, report, is_root=True)
        return report

    @classmethod
    def is_valid(
        cls, hierarchy: Union[KpiHierarchy, KpiNode], strict: bool = False
    ) -> bool:
        return cls.validate(hierarchy, strict).valid

    @classmethod
    def _validate_node(
        cls,
        node: KpiNode,
        path: str,
        strict: bool,
        report: ValidationReport,
        is_root: bool = False,
    ) -> None:
        if node.strategy == KpiStrategyId.RAW_VALUE:
            if node.edges:
                report.issues.append(
                    ValidationIssue(
                        path=path,
                        type_id=node.type_id,
                        message="Raw value node must not have edges",
                    )
                )
        elif strict:
            if not node.edges and not is_root:
                report.issues.append(
                    ValidationIssue(
                        path=path,
                        type_id=node.type_id,
                        message=f"{node.strategy.name} node has no edges",
                    )
                )
            elif not get_kpi_calculation_strategy(node.strategy).is_valid(node, strict):
                report.issues.append(
                    ValidationIssue(
                        path=path,
                        type_id=node.type_id,
                        message=(
                            f"{node.strategy.name} node can not have "
                            f"{len(node.edges)} edges"
                        ),
                    )
                )

        for edge in node.edges:
            cls._validate_node(
                edge.target, f"{path}/{edge.target.type_id}", strict, report
            )
