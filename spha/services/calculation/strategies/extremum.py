"""Minimum and maximum strategies.

Weights are documentation only for these strategies: every contributing
child keeps its planned weight and the score is the extreme child score.
"""

from typing import List

from spha.domain.models.kpi import KpiStrategyId
from spha.domain.models.results import CalculationResult, Success
from spha.services.calculation.strategies.base import (
    BaseKpiCalculationStrategy,
    Contribution,
)


class MinimumKPICalculationStrategy(BaseKpiCalculationStrategy):
    strategy_id = KpiStrategyId.MINIMUM

    def internal_calculate(
        self, contributions: List[Contribution], strict: bool
    ) -> CalculationResult:
        return Success(score=min(c.score for c in contributions))


class MaximumKPICalculationStrategy(BaseKpiCalculationStrategy):
    strategy_id = KpiStrategyId.MAXIMUM

    def internal_calculate(
        self, contributions: List[Contribution], strict: bool
    ) -> CalculationResult:
        return Success(score=max(c.score for c in contributions))
