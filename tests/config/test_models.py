"""Tests for pydantic config models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from grouporder.config.models import GroupOrderConfig, KindConfig, OrderingConfig


class TestGroupOrderConfig:
    def test_defaults(self) -> None:
        config = GroupOrderConfig()
        assert config.kinds == {}
        assert config.orderings == {}
        assert config.sort.field == "group"

    def test_from_dict(self) -> None:
        config = GroupOrderConfig.model_validate(
            {
                "kinds": {"Triage": {"groups": ["High", "Low"]}},
                "orderings": {"flip": {"kind": "Triage", "order": ["low", "high"]}},
                "sort": {"field": "priority"},
            }
        )
        assert config.kinds["Triage"] == KindConfig(groups=["High", "Low"])
        assert config.orderings["flip"] == OrderingConfig(kind="Triage", order=["low", "high"])
        assert config.sort.field == "priority"

    def test_kind_requires_groups(self) -> None:
        with pytest.raises(ValidationError):
            GroupOrderConfig.model_validate({"kinds": {"Triage": {}}})

    def test_frozen(self) -> None:
        config = GroupOrderConfig()
        with pytest.raises(ValidationError):
            config.sort = None  # type: ignore[assignment]
