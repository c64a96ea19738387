"""Software product health assessment: KPI hierarchy calculation engine."""

__version__ = "0.1.0"
