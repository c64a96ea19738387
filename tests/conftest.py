"""
Shared test fixtures for the calculation engine.
"""

import pytest

from spha.core import hierarchy_loader
from spha.domain.models import KpiStrategyId, Threshold
from tests.builders import hierarchy, leaf, node


@pytest.fixture
def two_leaf_average():
    """ROOT = 0.5 * A + 0.5 * B"""
    return hierarchy(
        node(
            "ROOT",
            KpiStrategyId.WEIGHTED_AVERAGE,
            (leaf("A"), 0.5),
            (leaf("B"), 0.5),
        )
    )


@pytest.fixture
def tech_lag_leaf():
    """Technical lag leaf with a single threshold of 50."""
    return leaf(
        "TECHNICAL_LAG_PROD_DIRECT_COMPONENT",
        thresholds=[Threshold(name="maxLag", value=50)],
    )


@pytest.fixture(autouse=True)
def _clear_hierarchy_cache():
    """Loaded hierarchy files never leak between tests."""
    hierarchy_loader.clear_cache()
    yield
    hierarchy_loader.clear_cache()
