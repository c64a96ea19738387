"""Tests for exception hierarchy."""

import pytest


def test_exception_hierarchy():
    """All exceptions inherit from SphaError."""
    from spha.core.exceptions import (
        SphaError,
        ConfigurationError,
        HierarchyError,
        HierarchyLoadError,
        UnknownStrategyError,
    )

    assert issubclass(ConfigurationError, SphaError)
    assert issubclass(HierarchyError, SphaError)
    assert issubclass(HierarchyLoadError, HierarchyError)
    assert issubclass(UnknownStrategyError, HierarchyError)


def test_exception_keeps_message():
    """Exceptions expose the message they were raised with."""
    from spha.core.exceptions import HierarchyLoadError

    with pytest.raises(HierarchyLoadError) as exc_info:
        raise HierarchyLoadError("Hierarchy file not found: missing.yaml")

    assert exc_info.value.message == "Hierarchy file not found: missing.yaml"
    assert str(exc_info.value) == "Hierarchy file not found: missing.yaml"
