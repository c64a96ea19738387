"""Post-processing of raw value leaves before aggregation.

Technical lag values are magnitudes (how far behind a dependency is), not
scores. They are remapped onto the inverted 0-100 score scale using the
node's highest threshold:

    lag <= threshold               -> 100
    threshold < lag < 2*threshold  -> linear decay from 100 to 0
    lag >= 2*threshold             -> 0

All other KPI types pass through unchanged.
"""

import math
from typing import Iterable, Optional

from spha.core.config import settings
from spha.domain.models.results import CalculationResult, Error, Success, score_of
from spha.services.calculation.runtime import HierarchyNode


class RawValueTransformer:
    """Delegates to a type-specific transform based on the node's KPI type.

    Args:
        technical_lag_type_ids: KPI types treated as technical lag components
            (default: settings.technical_lag_type_ids)
    """

    def __init__(self, technical_lag_type_ids: Optional[Iterable[str]] = None):
        if technical_lag_type_ids is None:
            technical_lag_type_ids = settings.technical_lag_type_ids
        self.technical_lag_type_ids = frozenset(technical_lag_type_ids)

    def transform(
        self, node: HierarchyNode, result: Optional[CalculationResult] = None
    ) -> CalculationResult:
        """Transform the result of a raw value node.

        Args:
            node: Raw value node
            result: Current result of the node (default: node.initial_result)
        """
        if result is None:
            result = node.initial_result
        if node.type_id in self.technical_lag_type_ids:
            return self.transform_tech_lag_component(node, result)
        return result

    def transform_tech_lag_component(
        self, node: HierarchyNode, result: Optional[CalculationResult] = None
    ) -> CalculationResult:
        if result is None:
            result = node.initial_result
        score = score_of(result)

        if not node.thresholds:
            return Error(reason=f"Thresholds for node {node!r} are empty.")

        if score < 0:
            return Error(reason=f"Score for node {node!r} is negative.")

        threshold = max(t.value for t in node.thresholds)
        return Success(score=tech_lag_score(score, threshold))


def tech_lag_score(lag: int, threshold: int) -> int:
    if lag <= threshold:
        return 100
    if lag >= threshold * 2:
        return 0
    ratio = (lag - threshold) / threshold
    # Half-way values round up
    return math.floor((1.0 - ratio) * 100 + 0.5)
