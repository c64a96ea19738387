"""Weighted average strategy."""

from typing import List

from spha.domain.models.kpi import KpiStrategyId
from spha.domain.models.results import CalculationResult, Success
from spha.services.calculation.strategies.base import (
    BaseKpiCalculationStrategy,
    ChildResult,
    Contribution,
    truncate,
)


class WeightedAverageKPICalculationStrategy(BaseKpiCalculationStrategy):
    """Sum of score x weight over the contributing children.

    The weight of excluded children is spread evenly over the contributing
    ones. Weights are not rescaled to sum to 1: with nothing excluded the
    declared weights are applied as they are.
    """

    strategy_id = KpiStrategyId.WEIGHTED_AVERAGE

    def actual_weights(self, children: List[ChildResult]) -> List[float]:
        contributing = [child for child in children if not child.has_no_result]
        missing_weight = sum(
            child.planned_weight for child in children if child.has_no_result
        )
        share = missing_weight / len(contributing)

        return [
            0.0 if child.has_no_result else child.planned_weight + share
            for child in children
        ]

    def internal_calculate(
        self, contributions: List[Contribution], strict: bool
    ) -> CalculationResult:
        total = sum(c.score * c.weight for c in contributions)
        return Success(score=truncate(total))
