"""Adapter contract models.

Tool adapters turn decoded tool output into raw KPI values. Per record they
return an AdapterResult: either a successful raw value together with the
record it came from, or a tagged validation error. Hard parse failures are
exceptions and belong to the caller that decoded the file.
"""

from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from spha.domain.models.kpi import CAMEL_CASE_CONFIG, RawValueKpi


class ErrorType(str, Enum):
    DATA_VALIDATION_ERROR = "DATA_VALIDATION_ERROR"


class VulnerabilityDto(BaseModel):
    """Scanner-independent vulnerability record."""

    model_config = ConfigDict(**CAMEL_CASE_CONFIG, frozen=True)

    cve_identifier: str
    package_name: str
    severity: float = Field(description="CVSS base score, expected in [0, 10]")
    version: Optional[str] = None


class AdapterSuccess(BaseModel):
    """A record that was scored."""

    model_config = ConfigDict(**CAMEL_CASE_CONFIG, frozen=True)

    kind: Literal["success"] = "success"
    raw_value_kpi: RawValueKpi
    origin: Any = None

    def __str__(self) -> str:
        return f"[Adapter Result Success]: {self.raw_value_kpi}"


class AdapterError(BaseModel):
    """A record that could not be scored."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    type: ErrorType = ErrorType.DATA_VALIDATION_ERROR


AdapterResult = Union[AdapterSuccess, AdapterError]
