"""Vulnerability records -> raw KPI values.

A vulnerability with CVSS severity s scores ``100 - int(s * 10)``, so the
most severe findings get the lowest scores. Records that can not be
scored come back as AdapterError values in place; nothing is raised and
nothing is logged, so callers decide how to report them.
"""

import uuid
from typing import Iterable, List

from spha.domain.models.adapter import (
    AdapterError,
    AdapterResult,
    AdapterSuccess,
    ErrorType,
    VulnerabilityDto,
)
from spha.domain.models.kpi import KpiType, RawValueKpi

MIN_SEVERITY = 0.0
MAX_SEVERITY = 10.0


class CveAdapter:
    """Maps scanner-independent vulnerability records to raw KPI values."""

    @classmethod
    def transform_code_vulnerability_to_kpi(
        cls, data: Iterable[VulnerabilityDto]
    ) -> List[AdapterResult]:
        return cls.transform_data_to_kpi(data, KpiType.CODE_VULNERABILITY_SCORE)

    @classmethod
    def transform_container_vulnerability_to_kpi(
        cls, data: Iterable[VulnerabilityDto]
    ) -> List[AdapterResult]:
        return cls.transform_data_to_kpi(data, KpiType.CONTAINER_VULNERABILITY_SCORE)

    @classmethod
    def transform_data_to_kpi(
        cls, data: Iterable[VulnerabilityDto], kpi_type: KpiType
    ) -> List[AdapterResult]:
        """One result per record, in input order."""
        results: List[AdapterResult] = []
        for vulnerability in data:
            if cls.is_valid(vulnerability):
                results.append(
                    AdapterSuccess(
                        raw_value_kpi=RawValueKpi(
                            type_id=kpi_type,
                            score=100 - int(vulnerability.severity * 10),
                            origin_id=str(uuid.uuid4()),
                        ),
                        origin=vulnerability,
                    )
                )
            else:
                results.append(AdapterError(type=ErrorType.DATA_VALIDATION_ERROR))
        return results

    @staticmethod
    def is_valid(vulnerability: VulnerabilityDto) -> bool:
        return (
            MIN_SEVERITY <= vulnerability.severity <= MAX_SEVERITY
            and bool(vulnerability.package_name.strip())
            and bool(vulnerability.cve_identifier.strip())
        )


def raw_values(results: Iterable[AdapterResult]) -> List[RawValueKpi]:
    """Raw KPI values of the successful results, dropping errors."""
    return [r.raw_value_kpi for r in results if isinstance(r, AdapterSuccess)]
