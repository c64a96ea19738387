"""Tests for KPI catalogue, raw values and hierarchy definition models."""

import pytest
from pydantic import ValidationError

from spha.domain.models import (
    KpiEdge,
    KpiHierarchy,
    KpiNode,
    KpiStrategyId,
    KpiType,
    MetaInfo,
    RawValueKpi,
    Threshold,
)


class TestRawValueKpi:
    """RawValueKpi construction and serialization."""

    @pytest.mark.parametrize("score", [0, 50, 100])
    def test_accepts_scores_in_range(self, score):
        assert RawValueKpi(type_id="SECRETS", score=score).score == score

    @pytest.mark.parametrize("score", [-1, 101])
    def test_rejects_scores_out_of_range(self, score):
        """Out of range scores fail at construction."""
        with pytest.raises(ValidationError):
            RawValueKpi(type_id="SECRETS", score=score)

    def test_ids_are_unique_by_default(self):
        a = RawValueKpi(type_id="SECRETS", score=1)
        b = RawValueKpi(type_id="SECRETS", score=1)

        assert a.id != b.id
        assert a.origin_id is None

    def test_enum_type_id_is_unwrapped(self):
        """KpiType members and plain strings are interchangeable."""
        kpi = RawValueKpi(type_id=KpiType.SECRETS, score=10)

        assert kpi.type_id == "SECRETS"

    def test_serializes_camel_case(self):
        kpi = RawValueKpi(type_id="SECRETS", score=10, id="r1", origin_id="o1")

        data = kpi.model_dump(by_alias=True)

        assert data == {"typeId": "SECRETS", "score": 10, "id": "r1", "originId": "o1"}
        assert RawValueKpi.model_validate(data) == kpi


class TestKpiNode:
    """Hierarchy definition nodes."""

    def test_edge_weight_must_be_positive(self):
        target = KpiNode(type_id="A", strategy=KpiStrategyId.RAW_VALUE)

        with pytest.raises(ValidationError):
            KpiEdge(target=target, weight=0.0)

    def test_strategy_wire_values(self):
        """Strategies are read from their serialized names."""
        data = {
            "typeId": "ROOT",
            "strategy": "WEIGHTED_RATIO_STRATEGY",
            "displayName": "Root",
            "metaInfo": {"description": "root node", "tags": ["a", "b"]},
            "edges": [
                {"weight": 1, "target": {"typeId": "A", "strategy": "RAW_VALUE_STRATEGY"}},
                {"weight": 1, "target": {"typeId": "B", "strategy": "RAW_VALUE_STRATEGY"}},
            ],
        }

        root = KpiNode.model_validate(data)

        assert root.strategy == KpiStrategyId.WEIGHTED_RATIO
        assert root.display_name == "Root"
        assert root.meta_info == MetaInfo(description="root node", tags={"a", "b"})
        assert [e.target.type_id for e in root.edges] == ["A", "B"]

    def test_definition_is_immutable(self):
        root = KpiNode(type_id="ROOT", strategy=KpiStrategyId.MAXIMUM)

        with pytest.raises(ValidationError):
            root.type_id = "OTHER"


class TestKpiHierarchy:
    """Hierarchy definition wrapper."""

    def test_create_stamps_latest_schema_version(self):
        h = KpiHierarchy.create(KpiNode(type_id="ROOT", strategy=KpiStrategyId.MAXIMUM))

        assert h.schema_version == "1.1.0"

    def test_unknown_schema_version_is_rejected(self):
        with pytest.raises(ValidationError):
            KpiHierarchy(
                root=KpiNode(type_id="ROOT", strategy=KpiStrategyId.MAXIMUM),
                schema_version="2.0.0",
            )

    def test_json_round_trip(self):
        root = KpiNode(
            type_id="ROOT",
            strategy=KpiStrategyId.WEIGHTED_AVERAGE,
            edges=[
                KpiEdge(
                    target=KpiNode(
                        type_id="LAG",
                        strategy=KpiStrategyId.RAW_VALUE,
                        thresholds=[Threshold(name="max", value=30)],
                    ),
                    weight=1.0,
                )
            ],
        )
        h = KpiHierarchy.create(root)

        restored = KpiHierarchy.model_validate_json(h.model_dump_json(by_alias=True))

        assert restored == h
        assert '"schemaVersion"' in h.model_dump_json(by_alias=True)
