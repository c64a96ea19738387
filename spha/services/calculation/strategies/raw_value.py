"""Raw value strategy: leaves resolved from their bound observation."""

from typing import List

from spha.domain.models.hierarchy import KpiNode
from spha.domain.models.kpi import KpiStrategyId
from spha.domain.models.results import CalculationResult, Error
from spha.services.calculation.strategies.base import (
    BaseKpiCalculationStrategy,
    Contribution,
)


class RawValueKPICalculationStrategy(BaseKpiCalculationStrategy):
    """Raw value nodes are never folded; the evaluator transforms them instead.

    Only the structural check is meaningful: a raw value node must not have
    children in either mode.
    """

    strategy_id = KpiStrategyId.RAW_VALUE

    def internal_calculate(
        self, contributions: List[Contribution], strict: bool
    ) -> CalculationResult:
        return Error(reason="Raw value nodes can not aggregate child results")

    def is_valid(self, node: KpiNode, strict: bool) -> bool:
        if node.strategy != self.strategy_id:
            return True
        return not node.edges
