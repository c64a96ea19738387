"""Tool adapters: decoded tool output -> raw KPI values."""

from spha.services.adapters.cve_adapter import CveAdapter, raw_values

__all__ = ["CveAdapter", "raw_values"]
