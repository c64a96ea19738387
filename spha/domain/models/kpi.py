"""KPI catalogue and raw KPI values.

Core Models:
    - KpiType: known KPI concepts (free-form type ids are still allowed)
    - KpiStrategyId: aggregation strategy a hierarchy node uses
    - Threshold / MetaInfo: descriptive data attached to hierarchy nodes
    - RawValueKpi: one observed measurement produced by a tool adapter

All models serialize with camelCase keys (``typeId``, ``originId``) and
accept snake_case field names on construction.
"""

import uuid
from enum import Enum
from typing import Optional, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


CAMEL_CASE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class KpiType(str, Enum):
    """Known KPI concepts referenced by the built-in hierarchy and adapters."""

    ROOT = "ROOT"

    # Security
    SECURITY = "SECURITY"
    SECRETS = "SECRETS"
    SAST_USAGE = "SAST_USAGE"
    CODE_VULNERABILITY_SCORE = "CODE_VULNERABILITY_SCORE"
    CONTAINER_VULNERABILITY_SCORE = "CONTAINER_VULNERABILITY_SCORE"
    MAXIMAL_VULNERABILITY = "MAXIMAL_VULNERABILITY"
    CHECKED_IN_BINARIES = "CHECKED_IN_BINARIES"

    # Process
    PROCESS_COMPLIANCE = "PROCESS_COMPLIANCE"
    PROCESS_TRANSPARENCY = "PROCESS_TRANSPARENCY"
    NUMBER_OF_COMMITS = "NUMBER_OF_COMMITS"
    NUMBER_OF_SIGNED_COMMITS = "NUMBER_OF_SIGNED_COMMITS"
    SIGNED_COMMITS_RATIO = "SIGNED_COMMITS_RATIO"
    IS_DEFAULT_BRANCH_PROTECTED = "IS_DEFAULT_BRANCH_PROTECTED"

    # Quality
    INTERNAL_QUALITY = "INTERNAL_QUALITY"
    EXTERNAL_QUALITY = "EXTERNAL_QUALITY"
    DOCUMENTATION = "DOCUMENTATION"
    DOCUMENTATION_INFRASTRUCTURE = "DOCUMENTATION_INFRASTRUCTURE"
    COMMENTS_IN_CODE = "COMMENTS_IN_CODE"

    # Dependency freshness
    LIB_DAYS_DEV = "LIB_DAYS_DEV"
    LIB_DAYS_PROD = "LIB_DAYS_PROD"
    TECHNICAL_LAG_DEV_DIRECT_COMPONENT = "TECHNICAL_LAG_DEV_DIRECT_COMPONENT"
    TECHNICAL_LAG_PROD_DIRECT_COMPONENT = "TECHNICAL_LAG_PROD_DIRECT_COMPONENT"
    TECHNICAL_LAG_DEV_TRANSITIVE_COMPONENT = "TECHNICAL_LAG_DEV_TRANSITIVE_COMPONENT"
    TECHNICAL_LAG_PROD_TRANSITIVE_COMPONENT = "TECHNICAL_LAG_PROD_TRANSITIVE_COMPONENT"


class KpiStrategyId(str, Enum):
    """Aggregation strategy of a hierarchy node.

    Values match the serialized form used by hierarchy files.
    """

    RAW_VALUE = "RAW_VALUE_STRATEGY"
    WEIGHTED_AVERAGE = "WEIGHTED_AVERAGE_STRATEGY"
    MINIMUM = "MINIMUM_STRATEGY"
    MAXIMUM = "MAXIMUM_STRATEGY"
    WEIGHTED_RATIO = "WEIGHTED_RATIO_STRATEGY"
    AND = "AND_STRATEGY"
    OR = "OR_STRATEGY"
    XOR = "XOR_STRATEGY"


class Threshold(BaseModel):
    """Named numeric threshold, read by the raw value transformer."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: int


class MetaInfo(BaseModel):
    """Free-form description and tags carried through to the result tree."""

    model_config = ConfigDict(frozen=True)

    description: Optional[str] = None
    tags: Set[str] = Field(default_factory=set)


class RawValueKpi(BaseModel):
    """One observed measurement for a KPI type.

    The score must already lie in [0, 100]; anything else is an adapter bug
    and fails validation on construction.
    """

    model_config = ConfigDict(**CAMEL_CASE_CONFIG, frozen=True)

    type_id: str = Field(description="KPI type this value feeds")
    score: int = Field(ge=0, le=100, description="Normalized score")
    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique id of this observation",
    )
    origin_id: Optional[str] = Field(
        default=None, description="Links the value to the tool record it came from"
    )

    @field_validator("type_id", mode="before")
    @classmethod
    def _type_id_from_enum(cls, v):
        return enum_value(v)


def enum_value(v):
    """Unwrap enum members so KpiType.X and "X" are interchangeable as type ids."""
    if isinstance(v, Enum):
        return v.value
    return v
