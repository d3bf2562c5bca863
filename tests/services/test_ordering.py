"""Tests for OrderingService."""

from __future__ import annotations

from typing import Any

import pytest

from grouporder.config.models import GroupOrderConfig
from grouporder.services.catalog import KindCatalog
from grouporder.services.ordering import OrderingService
from grouporder.services.telemetry import enable_telemetry


@pytest.fixture
def service(catalog: KindCatalog) -> OrderingService:
    return OrderingService(catalog)


def _tickets(*priorities: str) -> list[dict[str, Any]]:
    return [{"id": i, "priority": p} for i, p in enumerate(priorities)]


class TestListKinds:
    def test_lists_configured_kinds(self, service: OrderingService) -> None:
        result = service.list_kinds()
        assert result.ok
        assert result.op == "list_kinds"
        assert result.data["count"] == 2
        triage = result.data["items"][0]
        assert triage == {
            "name": "Triage",
            "groups": ["high", "medium", "low"],
            "orderings": ["support-queue"],
        }

    def test_empty(self, empty_catalog: KindCatalog) -> None:
        result = OrderingService(empty_catalog).list_kinds()
        assert result.ok
        assert result.data == {"items": [], "count": 0}

    def test_malformed_kind(self) -> None:
        config = GroupOrderConfig.model_validate({"kinds": {"Bad": {"groups": []}}})
        result = OrderingService(KindCatalog(config)).list_kinds()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_KIND"


class TestDescribe:
    def test_default(self, service: OrderingService) -> None:
        result = service.describe("Abc")
        assert result.ok
        assert result.data["order"] == ["a", "b", "c"]
        assert result.data["ranks"] == {"a": 0, "b": 1, "c": 2}
        assert result.data["is_default"] is True

    def test_explicit(self, service: OrderingService) -> None:
        result = service.describe("Abc", order=["c", "a", "b"])
        assert result.data["ranks"]["a"] == 1
        assert result.data["order"][0] == "c"
        assert result.data["is_default"] is False

    def test_named(self, service: OrderingService) -> None:
        result = service.describe("Triage", ordering="support-queue")
        assert result.data["order"] == ["medium", "high", "low"]

    @pytest.mark.parametrize(
        "kwargs,code",
        [
            ({"kind": "Nope"}, "UNKNOWN_KIND"),
            ({"kind": "Abc", "ordering": "nope"}, "UNKNOWN_ORDERING"),
            ({"kind": "Abc", "ordering": "support-queue"}, "KIND_MISMATCH"),
            ({"kind": "Abc", "order": ["a", "a", "b"]}, "DUPLICATE_LABEL"),
            ({"kind": "Abc", "order": ["a", "b"]}, "WRONG_CARDINALITY"),
            ({"kind": "Abc", "order": ["a", "b", "z"]}, "UNKNOWN_LABEL"),
        ],
    )
    def test_errors(self, service: OrderingService, kwargs: dict[str, Any], code: str) -> None:
        result = service.describe(**kwargs)
        assert not result.ok
        assert result.op == "describe"
        assert result.error is not None
        assert result.error.code == code


class TestValidate:
    def test_valid(self, service: OrderingService) -> None:
        result = service.validate("Triage", ["low", "high", "medium"])
        assert result.ok
        assert result.data == {
            "kind": "Triage",
            "order": ["low", "high", "medium"],
            "valid": True,
        }

    def test_duplicate_detail(self, service: OrderingService) -> None:
        result = service.validate("Triage", ["low", "low", "high"])
        assert result.error is not None
        assert result.error.code == "DUPLICATE_LABEL"
        assert result.error.detail["positions"] == [0, 1]

    def test_subset(self, service: OrderingService) -> None:
        result = service.validate("Triage", ["low"])
        assert result.error is not None
        assert result.error.code == "WRONG_CARDINALITY"
        assert result.error.detail["expected"] == 3


class TestSortRecords:
    def test_default_order(self, service: OrderingService) -> None:
        records = _tickets("low", "high", "medium", "high")
        result = service.sort_records("Triage", records)
        assert result.ok
        assert [r["id"] for r in result.data["items"]] == [1, 3, 2, 0]
        assert result.data["field"] == "priority"
        assert result.data["group_counts"] == {"high": 2, "medium": 1, "low": 1}
        assert result.data["count"] == 4

    def test_named_ordering(self, service: OrderingService) -> None:
        records = _tickets("low", "high", "medium", "high")
        result = service.sort_records("Triage", records, ordering="support-queue")
        assert [r["id"] for r in result.data["items"]] == [2, 1, 3, 0]

    def test_explicit_field_and_order(self, service: OrderingService) -> None:
        records = [{"n": n, "g": "abc"[n % 3]} for n in range(6)]
        result = service.sort_records("Abc", records, field="g", order=["b", "a", "c"])
        assert [r["n"] for r in result.data["items"]] == [1, 4, 0, 3, 2, 5]

    def test_input_not_mutated(self, service: OrderingService) -> None:
        records = _tickets("low", "high")
        service.sort_records("Triage", records)
        assert [r["id"] for r in records] == [0, 1]

    def test_missing_field(self, service: OrderingService) -> None:
        result = service.sort_records("Triage", [{"priority": "low"}, {"id": 1}])
        assert result.error is not None
        assert result.error.code == "MISSING_FIELD"
        assert result.error.detail == {"index": 1, "field": "priority"}

    def test_non_object_record(self, service: OrderingService) -> None:
        result = service.sort_records("Triage", [["low"]])
        assert result.error is not None
        assert result.error.code == "INVALID_RECORD"

    def test_unknown_group_in_record(self, service: OrderingService) -> None:
        result = service.sort_records("Triage", _tickets("low", "urgent"))
        assert result.error is not None
        assert result.error.code == "UNKNOWN_LABEL"
        assert result.error.detail["name"] == "urgent"

    def test_unknown_kind(self, service: OrderingService) -> None:
        result = service.sort_records("Nope", [])
        assert result.error is not None
        assert result.error.code == "UNKNOWN_KIND"

    def test_telemetry_meta(self, service: OrderingService) -> None:
        enable_telemetry()
        result = service.sort_records("Triage", _tickets("low", "high"))
        telemetry = result.meta["telemetry"]  # type: ignore[index]
        assert telemetry["name"] == "OrderingService.sort_records"
        assert [child["name"] for child in telemetry["children"]] == ["resolve_ordering", "sort"]
        assert telemetry["annotations"] == {"records": 2}

    def test_no_meta_without_telemetry(self, service: OrderingService) -> None:
        assert service.sort_records("Triage", []).meta is None
