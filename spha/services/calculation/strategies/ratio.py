"""Weighted ratio strategy: first child divided by second child."""

from typing import List, Optional

from spha.domain.models.hierarchy import KpiNode
from spha.domain.models.kpi import KpiStrategyId
from spha.domain.models.results import CalculationResult, Error, Success
from spha.services.calculation.strategies.base import (
    BaseKpiCalculationStrategy,
    ChildResult,
    Contribution,
    truncate,
)


class WeightedRatioKPICalculationStrategy(BaseKpiCalculationStrategy):
    """score = numerator / denominator x 100.

    All or nothing: exactly two children are required in both modes, and
    a child without a result makes the node an Error rather than Incomplete.
    """

    strategy_id = KpiStrategyId.WEIGHTED_RATIO
    requires_all_results = True

    def check_structure(
        self, children: List[ChildResult], strict: bool
    ) -> Optional[Error]:
        if len(children) != 2:
            return Error(
                reason=f"Ratio calculation strategy requires exactly two elements, got {len(children)}"
            )
        return None

    def missing_results_reason(self) -> str:
        return "Ratio calculation strategy has elements without result"

    def internal_calculate(
        self, contributions: List[Contribution], strict: bool
    ) -> CalculationResult:
        numerator, denominator = contributions
        if denominator.score == 0:
            return Error(reason="Ratio calculation strategy denominator is zero")
        return Success(score=truncate(numerator.score / denominator.score * 100))

    def is_valid(self, node: KpiNode, strict: bool) -> bool:
        if node.strategy != self.strategy_id or not node.edges:
            return True
        if strict:
            return len(node.edges) == 2
        return len(node.edges) >= 2
