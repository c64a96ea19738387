"""Domain models package."""

from .kpi import KpiType, KpiStrategyId, Threshold, MetaInfo, RawValueKpi
from .hierarchy import KpiNode, KpiEdge, KpiHierarchy, SCHEMA_VERSIONS
from .results import (
    CalculationResult,
    Success,
    Incomplete,
    Error,
    Empty,
    KpiResultNode,
    KpiResultEdge,
    KpiResultHierarchy,
)
from .default_hierarchy import default_hierarchy
from .adapter import (
    AdapterResult,
    AdapterSuccess,
    AdapterError,
    ErrorType,
    VulnerabilityDto,
)

__all__ = [
    "KpiType",
    "KpiStrategyId",
    "Threshold",
    "MetaInfo",
    "RawValueKpi",
    "KpiNode",
    "KpiEdge",
    "KpiHierarchy",
    "SCHEMA_VERSIONS",
    "CalculationResult",
    "Success",
    "Incomplete",
    "Error",
    "Empty",
    "KpiResultNode",
    "KpiResultEdge",
    "KpiResultHierarchy",
    "default_hierarchy",
    "AdapterResult",
    "AdapterSuccess",
    "AdapterError",
    "ErrorType",
    "VulnerabilityDto",
]
