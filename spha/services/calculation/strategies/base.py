"""Base class and shared rules for KPI calculation strategies.

A strategy folds the already computed results of a node's children into
one result for the node. Shared rules:

- No children -> Empty
- Children whose result is Error or Empty are excluded and get an actual
  weight of 0
- All children excluded -> Empty
- Some children excluded, or any child Incomplete -> Incomplete
- Computed scores are clamped to [0, 100]
- A node whose calculation ends in Error applies no weight to any child

Strategies never mutate their input. They return the result together with
the actual weight applied to each child, in child order.

Subclasses register themselves by declaring ``strategy_id``:

    class MyStrategy(BaseKpiCalculationStrategy):
        strategy_id = KpiStrategyId.MAXIMUM

        def internal_calculate(self, contributions, strict):
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple

from spha.core.exceptions import UnknownStrategyError
from spha.domain.models.hierarchy import KpiNode
from spha.domain.models.kpi import KpiStrategyId
from spha.domain.models.results import (
    CalculationResult,
    Empty,
    Error,
    Incomplete,
    Success,
    has_score,
    score_of,
)


@dataclass(frozen=True)
class ChildResult:
    """A child's evaluated result seen through its parent edge."""

    planned_weight: float
    result: CalculationResult

    @property
    def has_no_result(self) -> bool:
        return not has_score(self.result)

    @property
    def score(self) -> int:
        return score_of(self.result)


@dataclass(frozen=True)
class Contribution:
    """Score and applied weight of a child that takes part in the calculation."""

    score: int
    weight: float


@dataclass(frozen=True)
class StrategyOutcome:
    """Result of a node plus the actual weight applied to each child."""

    result: CalculationResult
    actual_weights: Tuple[float, ...]


def get_result_in_valid_range(result: CalculationResult) -> CalculationResult:
    """Clamp the score of Success/Incomplete results to [0, 100].

    Error and Empty results are returned unchanged.
    """
    if isinstance(result, (Success, Incomplete)):
        clamped = max(0, min(100, result.score))
        if clamped != result.score:
            return result.model_copy(update={"score": clamped})
    return result


def truncate(value: float) -> int:
    """Truncate a computed score to int, absorbing float noise like 84.99999999."""
    return int(value + 1e-9)


class BaseKpiCalculationStrategy(ABC):
    """Abstract base for all calculation strategies.

    Attributes:
        strategy_id: Strategy this class implements (triggers registration)
        requires_all_results: When True, any child without a result turns
            the whole node into an Error instead of an Incomplete result
    """

    strategy_id: ClassVar[KpiStrategyId]
    requires_all_results: ClassVar[bool] = False

    _registry: ClassVar[Dict[KpiStrategyId, type["BaseKpiCalculationStrategy"]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "strategy_id" in cls.__dict__:
            cls._registry[cls.strategy_id] = cls

    @classmethod
    def get_registered_strategies(
        cls,
    ) -> Dict[KpiStrategyId, type["BaseKpiCalculationStrategy"]]:
        return cls._registry.copy()

    def calculate(
        self, children: Sequence[ChildResult], strict: bool = False
    ) -> StrategyOutcome:
        """Fold the children's results into the node's result.

        Args:
            children: Child results in edge order
            strict: Strict structural checks

        Returns:
            StrategyOutcome with the node's result and per-child actual weights
        """
        children = list(children)
        no_weights = tuple(0.0 for _ in children)

        if not children:
            return StrategyOutcome(result=Empty(), actual_weights=())

        structural_error = self.check_structure(children, strict)
        if structural_error is not None:
            return StrategyOutcome(result=structural_error, actual_weights=no_weights)

        missing = sum(1 for child in children if child.has_no_result)

        if missing and self.requires_all_results:
            return StrategyOutcome(
                result=Error(reason=self.missing_results_reason()),
                actual_weights=no_weights,
            )

        if missing == len(children):
            return StrategyOutcome(
                result=Empty(reason=f"None of the {len(children)} children has a result"),
                actual_weights=no_weights,
            )

        actual_weights = self.actual_weights(children)
        contributions = [
            Contribution(score=child.score, weight=weight)
            for child, weight in zip(children, actual_weights)
            if not child.has_no_result
        ]

        result = get_result_in_valid_range(
            self.internal_calculate(contributions, strict)
        )

        if isinstance(result, Error):
            return StrategyOutcome(result=result, actual_weights=no_weights)

        if isinstance(result, Success):
            reason = self._incomplete_reason(children, missing)
            if reason is not None:
                result = Incomplete(score=result.score, reason=reason)

        return StrategyOutcome(result=result, actual_weights=tuple(actual_weights))

    def actual_weights(self, children: List[ChildResult]) -> List[float]:
        """Planned weight for contributing children, 0 for excluded ones."""
        return [0.0 if child.has_no_result else child.planned_weight for child in children]

    def check_structure(
        self, children: List[ChildResult], strict: bool
    ) -> Optional[Error]:
        """Return an Error when the number of children does not fit the strategy."""
        return None

    def missing_results_reason(self) -> str:
        return f"{self.__class__.__name__} has elements without result"

    @abstractmethod
    def internal_calculate(
        self, contributions: List[Contribution], strict: bool
    ) -> CalculationResult:
        """Compute the node result from the contributing children (never empty)."""
        pass

    def is_valid(self, node: KpiNode, strict: bool) -> bool:
        """Whether a definition node is structurally usable with this strategy.

        Nodes of another strategy and nodes without edges are not judged here.
        """
        return True

    @staticmethod
    def _incomplete_reason(children: List[ChildResult], missing: int) -> Optional[str]:
        if missing:
            return f"{missing} of {len(children)} children have no result"
        incomplete = sum(1 for child in children if isinstance(child.result, Incomplete))
        if incomplete:
            return f"{incomplete} of {len(children)} children are incomplete"
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


def get_kpi_calculation_strategy(
    strategy_id: KpiStrategyId,
) -> BaseKpiCalculationStrategy:
    """Look up the strategy implementation for a strategy id.

    Raises:
        UnknownStrategyError: If no strategy is registered for the id
    """
    strategy_class = BaseKpiCalculationStrategy.get_registered_strategies().get(
        strategy_id
    )
    if strategy_class is None:
        raise UnknownStrategyError(f"No calculation strategy for {strategy_id}")
    return strategy_class()
