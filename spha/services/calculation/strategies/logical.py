"""Boolean strategies.

A child counts as true when its score is non-zero. The node scores 100
when the condition holds and 0 otherwise.
"""

from typing import List, Optional

from spha.domain.models.hierarchy import KpiNode
from spha.domain.models.kpi import KpiStrategyId
from spha.domain.models.results import CalculationResult, Error, Success
from spha.services.calculation.strategies.base import (
    BaseKpiCalculationStrategy,
    ChildResult,
    Contribution,
)


def _as_score(value: bool) -> int:
    return 100 if value else 0


class AndKPICalculationStrategy(BaseKpiCalculationStrategy):
    strategy_id = KpiStrategyId.AND

    def internal_calculate(
        self, contributions: List[Contribution], strict: bool
    ) -> CalculationResult:
        return Success(score=_as_score(all(c.score > 0 for c in contributions)))


class OrKPICalculationStrategy(BaseKpiCalculationStrategy):
    strategy_id = KpiStrategyId.OR

    def internal_calculate(
        self, contributions: List[Contribution], strict: bool
    ) -> CalculationResult:
        return Success(score=_as_score(any(c.score > 0 for c in contributions)))


class XorKPICalculationStrategy(BaseKpiCalculationStrategy):
    """True when exactly one of (at most) two children is true."""

    strategy_id = KpiStrategyId.XOR

    def check_structure(
        self, children: List[ChildResult], strict: bool
    ) -> Optional[Error]:
        if len(children) > 2:
            return Error(
                reason=f"XOR calculation strategy supports at most two elements, got {len(children)}"
            )
        if strict and len(children) != 2:
            return Error(
                reason=f"XOR calculation strategy requires exactly two elements, got {len(children)}"
            )
        return None

    def internal_calculate(
        self, contributions: List[Contribution], strict: bool
    ) -> CalculationResult:
        truthy = sum(1 for c in contributions if c.score > 0)
        return Success(score=_as_score(truthy == 1))

    def is_valid(self, node: KpiNode, strict: bool) -> bool:
        if node.strategy != self.strategy_id or not node.edges:
            return True
        if strict:
            return len(node.edges) == 2
        return len(node.edges) <= 2
