"""Hierarchy definition: the user-authored scoring tree.

A definition says *how* a score is computed. Each node names a KPI type,
the strategy used to fold its children and the weighted edges to those
children. Definitions are immutable; the same node object may be
referenced from several parents (the binder expands it per position).
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from spha.domain.models.kpi import (
    CAMEL_CASE_CONFIG,
    KpiStrategyId,
    MetaInfo,
    Threshold,
    enum_value,
)

SCHEMA_VERSIONS: List[str] = sorted(["1.1.0"])


class KpiNode(BaseModel):
    """One scoring concept in a hierarchy definition."""

    model_config = ConfigDict(**CAMEL_CASE_CONFIG, frozen=True)

    type_id: str
    strategy: KpiStrategyId
    edges: List["KpiEdge"] = Field(default_factory=list)
    display_name: Optional[str] = None
    thresholds: List[Threshold] = Field(default_factory=list)
    meta_info: Optional[MetaInfo] = None

    @field_validator("type_id", mode="before")
    @classmethod
    def _type_id_from_enum(cls, v):
        return enum_value(v)


class KpiEdge(BaseModel):
    """Weighted edge from a definition node to one child."""

    model_config = ConfigDict(**CAMEL_CASE_CONFIG, frozen=True)

    target: KpiNode
    weight: float = Field(gt=0.0)


KpiNode.model_rebuild()


class KpiHierarchy(BaseModel):
    """A complete hierarchy definition stamped with its schema version."""

    model_config = ConfigDict(**CAMEL_CASE_CONFIG, frozen=True)

    root: KpiNode
    schema_version: str = Field(default=SCHEMA_VERSIONS[-1])

    @field_validator("schema_version")
    @classmethod
    def _supported_schema_version(cls, v: str) -> str:
        if v not in SCHEMA_VERSIONS:
            raise ValueError(
                f"Unsupported schema version {v!r}, expected one of {SCHEMA_VERSIONS}"
            )
        return v

    @classmethod
    def create(cls, root: KpiNode) -> "KpiHierarchy":
        """Wrap a root node using the latest schema version."""
        return cls(root=root, schema_version=SCHEMA_VERSIONS[-1])
