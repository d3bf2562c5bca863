"""Tests for output formatting and Rich renderers."""

from __future__ import annotations

import json
import re

from grouporder.output.formatters import OutputSettings, format_result
from grouporder.output.renderers import render_quiet, render_result
from grouporder.services.result import ServiceError, ServiceResult

SORTED = ServiceResult(
    ok=True,
    op="sort",
    data={
        "kind": "Abc",
        "field": "g",
        "order": ["b", "a", "c"],
        "group_counts": {"b": 1, "a": 1, "c": 0},
        "items": [{"g": "b"}, {"g": "a"}],
        "count": 2,
    },
)

DESCRIBED = ServiceResult(
    ok=True,
    op="describe",
    data={
        "kind": "Abc",
        "order": ["c", "a", "b"],
        "ranks": {"c": 0, "a": 1, "b": 2},
        "is_default": False,
    },
)

FAILED = ServiceResult(
    ok=False,
    op="validate",
    error=ServiceError(
        code="DUPLICATE_LABEL",
        message="Found duplicate group 'a' for Abc at positions 0 and 1",
        detail={"label": "a"},
    ),
)


class TestFormatResult:
    def test_json_mode(self) -> None:
        output = format_result(SORTED, settings=OutputSettings(json_output=True))
        parsed = json.loads(output)
        assert parsed["op"] == "sort"
        assert parsed["data"]["items"] == [{"g": "b"}, {"g": "a"}]

    def test_json_beats_quiet(self) -> None:
        output = format_result(SORTED, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["ok"] is True

    def test_quiet_mode(self) -> None:
        output = format_result(SORTED, settings=OutputSettings(quiet=True))
        assert output.splitlines() == ['{"g":"b"}', '{"g":"a"}']

    def test_default_settings_use_rich(self) -> None:
        assert format_result(DESCRIBED).startswith("OK  describe")


class TestRenderResult:
    def test_describe_table(self) -> None:
        output = render_result(DESCRIBED)
        assert "kind: Abc" in output
        assert "is_default: False" in output
        lines = [re.sub(r"[^\w\s]", " ", line).split() for line in output.splitlines()]
        assert ["0", "c"] in lines
        assert ["1", "a"] in lines

    def test_sort_lists_records(self) -> None:
        output = render_result(SORTED)
        assert 'group_counts: {"b":1,"a":1,"c":0}' in output
        assert '  {"g":"b"}' in output

    def test_kinds_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="list_kinds",
            data={
                "items": [{"name": "Abc", "groups": ["a", "b", "c"], "orderings": ["bac"]}],
                "count": 1,
            },
        )
        output = render_result(result)
        assert "Abc" in output
        assert "a, b, c" in output
        assert "bac" in output

    def test_no_kinds(self) -> None:
        result = ServiceResult(ok=True, op="list_kinds", data={"items": [], "count": 0})
        assert "No kinds configured." in render_result(result)

    def test_generic(self) -> None:
        result = ServiceResult(
            ok=True,
            op="validate",
            data={"kind": "Abc", "order": ["a", "b", "c"], "valid": True},
        )
        output = render_result(result)
        assert "valid: True" in output
        assert 'order: ["a","b","c"]' in output

    def test_error(self) -> None:
        output = render_result(FAILED)
        assert output.startswith("ERROR  validate")
        assert "duplicate group" in output
        assert "detail" not in output

    def test_error_verbose_detail(self) -> None:
        output = render_result(FAILED, verbose=True)
        assert "label: a" in output

    def test_verbose_telemetry_tree(self) -> None:
        result = DESCRIBED.model_copy(
            update={
                "meta": {
                    "telemetry": {
                        "name": "OrderingService.describe",
                        "duration_ms": 1.5,
                        "children": [{"name": "resolve_ordering", "duration_ms": 0.5}],
                    }
                }
            }
        )
        output = render_result(result, verbose=True)
        assert "OrderingService.describe" in output
        assert "resolve_ordering" in output


class TestRenderQuiet:
    def test_order_results(self) -> None:
        assert render_quiet(DESCRIBED) == "c a b"

    def test_error(self) -> None:
        assert render_quiet(FAILED).startswith("ERROR: validate")

    def test_other_ops(self) -> None:
        result = ServiceResult(ok=True, op="list_kinds", data={"items": [], "count": 0})
        assert render_quiet(result) == "OK: list_kinds"
