"""Calculation results and the result hierarchy.

Every node of an evaluated hierarchy carries exactly one CalculationResult:

    - Success: node fully resolved
    - Incomplete: node resolved from a subset of its children
    - Error: node could not be resolved (structural problem)
    - Empty: nothing below the node produced a value

The result hierarchy mirrors the evaluated tree and is the serializable
output of a calculation run.
"""

import uuid
from datetime import datetime, timezone
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from spha.domain.models.hierarchy import SCHEMA_VERSIONS
from spha.domain.models.kpi import CAMEL_CASE_CONFIG, KpiStrategyId, MetaInfo, Threshold

DEFAULT_EMPTY_REASON = "This KPI is empty"


class Success(BaseModel):
    """Node fully resolved."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    score: int


class Incomplete(BaseModel):
    """Node resolved, but not every child contributed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["incomplete"] = "incomplete"
    score: int
    reason: str


class Error(BaseModel):
    """Node could not be resolved."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    reason: str


class Empty(BaseModel):
    """No child produced any contribution."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["empty"] = "empty"
    reason: str = DEFAULT_EMPTY_REASON


CalculationResult = Annotated[
    Union[Success, Incomplete, Error, Empty], Field(discriminator="kind")
]


def has_score(result: CalculationResult) -> bool:
    """True for results that carry a score (Success or Incomplete)."""
    return isinstance(result, (Success, Incomplete))


def score_of(result: CalculationResult) -> int:
    """Score of a result; results without a score count as 0."""
    if isinstance(result, (Success, Incomplete)):
        return result.score
    return 0


class KpiResultEdge(BaseModel):
    """Edge of the result tree with the planned and the applied weight."""

    model_config = ConfigDict(**CAMEL_CASE_CONFIG, frozen=True)

    target: "KpiResultNode"
    planned_weight: float
    actual_weight: float


class KpiResultNode(BaseModel):
    """Evaluated node: definition data plus its calculation result."""

    model_config = ConfigDict(**CAMEL_CASE_CONFIG, frozen=True)

    type_id: str
    strategy: KpiStrategyId
    result: CalculationResult
    edges: List[KpiResultEdge] = Field(default_factory=list)
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    origin_id: Optional[str] = None
    display_name: Optional[str] = None
    thresholds: List[Threshold] = Field(default_factory=list)
    meta_info: Optional[MetaInfo] = None


KpiResultEdge.model_rebuild()


class KpiResultHierarchy(BaseModel):
    """Serializable snapshot of a calculation run."""

    model_config = ConfigDict(**CAMEL_CASE_CONFIG, frozen=True)

    root: KpiResultNode
    schema_version: str = Field(default=SCHEMA_VERSIONS[-1])
    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    @classmethod
    def create(cls, root: KpiResultNode) -> "KpiResultHierarchy":
        """Wrap a result root using the latest schema version."""
        return cls(root=root, schema_version=SCHEMA_VERSIONS[-1])
