from spha.services.calculation import calculate_kpis
from spha.services.adapters import CveAdapter

__all__ = ["calculate_kpis", "CveAdapter"]
