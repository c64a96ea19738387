"""KPI calculation strategies.

Importing this package registers every strategy; look them up by id with
get_kpi_calculation_strategy().
"""

from spha.services.calculation.strategies.base import (
    BaseKpiCalculationStrategy,
    ChildResult,
    Contribution,
    StrategyOutcome,
    get_kpi_calculation_strategy,
    get_result_in_valid_range,
)
from spha.services.calculation.strategies.raw_value import RawValueKPICalculationStrategy
from spha.services.calculation.strategies.weighted_average import (
    WeightedAverageKPICalculationStrategy,
)
from spha.services.calculation.strategies.extremum import (
    MinimumKPICalculationStrategy,
    MaximumKPICalculationStrategy,
)
from spha.services.calculation.strategies.ratio import WeightedRatioKPICalculationStrategy
from spha.services.calculation.strategies.logical import (
    AndKPICalculationStrategy,
    OrKPICalculationStrategy,
    XorKPICalculationStrategy,
)

__all__ = [
    "BaseKpiCalculationStrategy",
    "ChildResult",
    "Contribution",
    "StrategyOutcome",
    "get_kpi_calculation_strategy",
    "get_result_in_valid_range",
    "RawValueKPICalculationStrategy",
    "WeightedAverageKPICalculationStrategy",
    "MinimumKPICalculationStrategy",
    "MaximumKPICalculationStrategy",
    "WeightedRatioKPICalculationStrategy",
    "AndKPICalculationStrategy",
    "OrKPICalculationStrategy",
    "XorKPICalculationStrategy",
]
