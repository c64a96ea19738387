"""KPI calculation package.

Pipeline:
- Binding: definition + raw values -> runtime hierarchy (runtime.py)
- Evaluation: post-order fold with per-strategy rules (evaluator.py, strategies/)
- Snapshot: runtime hierarchy + results -> result hierarchy (evaluator.py)
"""

from spha.services.calculation.calculator import calculate_kpis
from spha.services.calculation.evaluator import (
    Evaluation,
    calculate_node,
    evaluate,
    to_result_hierarchy,
)
from spha.services.calculation.runtime import (
    HierarchyEdge,
    HierarchyNode,
    bind,
    depth_first_traversal,
)
from spha.services.calculation.strategies import get_kpi_calculation_strategy
from spha.services.calculation.transformation import RawValueTransformer
from spha.services.calculation.validator import (
    HierarchyValidator,
    ValidationIssue,
    ValidationReport,
)

__all__ = [
    "calculate_kpis",
    "Evaluation",
    "calculate_node",
    "evaluate",
    "to_result_hierarchy",
    "HierarchyEdge",
    "HierarchyNode",
    "bind",
    "depth_first_traversal",
    "get_kpi_calculation_strategy",
    "RawValueTransformer",
    "HierarchyValidator",
    "ValidationIssue",
    "ValidationReport",
]
