"""
Custom exception hierarchy for the health score engine.

All application exceptions inherit from SphaError. The calculation itself
reports structural problems as Error results, so these are raised only at
the edges: configuration, hierarchy files and strategy lookup.
"""


class SphaError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(SphaError):
    """Invalid or missing configuration."""

    pass


# =============================================================================
# Hierarchy Errors
# =============================================================================


class HierarchyError(SphaError):
    """Base for KPI hierarchy errors."""

    pass


class HierarchyLoadError(HierarchyError):
    """Hierarchy file could not be read or does not describe a hierarchy."""

    pass


class UnknownStrategyError(HierarchyError):
    """No calculation strategy is registered for a strategy id."""

    pass
