"""One-call KPI calculation: bind, evaluate, snapshot.

Usage:
    from spha.services.calculation import calculate_kpis

    result = calculate_kpis(default_hierarchy(), raw_values)
    result.root.result  # Success / Incomplete / Error / Empty
"""

import uuid
from typing import Iterable, List, Optional

import structlog

from spha.core.config import settings
from spha.core.logging import bind_context, clear_context
from spha.domain.models.hierarchy import KpiHierarchy
from spha.domain.models.kpi import RawValueKpi
from spha.domain.models.results import KpiResultHierarchy
from spha.services.calculation.evaluator import evaluate, to_result_hierarchy
from spha.services.calculation.runtime import bind
from spha.services.calculation.transformation import RawValueTransformer
from spha.services.calculation.validator import HierarchyValidator

log = structlog.get_logger(__name__)


def calculate_kpis(
    hierarchy: KpiHierarchy,
    raw_values: Iterable[RawValueKpi],
    strict: Optional[bool] = None,
    transformer: Optional[RawValueTransformer] = None,
) -> KpiResultHierarchy:
    """Compute a result hierarchy from a definition and one run's raw values.

    The definition is never modified, so the same hierarchy can be reused
    across runs and threads.

    Args:
        hierarchy: Hierarchy definition
        raw_values: Raw KPI values of this run
        strict: Strict structural checks (default: settings.strict_mode)
        transformer: Raw value transformer (default: configured technical lag family)

    Returns:
        Result hierarchy with a result on every node and actual weights on every edge
    """
    if strict is None:
        strict = settings.strict_mode
    raw_values = list(raw_values)

    bind_context(calculation_id=str(uuid.uuid4()))
    try:
        return _calculate(hierarchy, raw_values, strict, transformer)
    finally:
        clear_context("calculation_id")


def _calculate(
    hierarchy: KpiHierarchy,
    raw_values: List[RawValueKpi],
    strict: bool,
    transformer: Optional[RawValueTransformer],
) -> KpiResultHierarchy:
    if settings.validate_before_calculation:
        report = HierarchyValidator.validate(hierarchy, strict)
        if not report.valid:
            log.warning(
                "hierarchy_validation_issues",
                strict=strict,
                issue_count=len(report.issues),
                issues=[f"{i.path}: {i.message}" for i in report.issues],
            )

    log.info(
        "kpi_calculation_started",
        root_type_id=hierarchy.root.type_id,
        raw_value_count=len(raw_values),
        strict=strict,
    )

    runtime_root = bind(hierarchy.root, raw_values)
    evaluation = evaluate(runtime_root, strict=strict, transformer=transformer)
    result = to_result_hierarchy(evaluation)

    log.info(
        "kpi_calculation_completed",
        node_count=len(evaluation.results),
        root_result=result.root.result.kind,
        root_score=getattr(result.root.result, "score", None),
    )
    return result
