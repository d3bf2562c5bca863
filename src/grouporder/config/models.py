"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, grouporder.toml only declares
kinds, named orderings, and overrides.

Example::

    [kinds.Triage]
    groups = ["High", "Medium", "Low"]

    [orderings.support-queue]
    kind = "Triage"
    order = ["medium", "high", "low"]

    [sort]
    field = "priority"
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class KindConfig(BaseModel):
    """[kinds.<Name>] section: declared groups in default order."""

    model_config = {"frozen": True}

    groups: list[str]


class OrderingConfig(BaseModel):
    """[orderings.<name>] section: a named permutation of one kind."""

    model_config = {"frozen": True}

    kind: str
    order: list[str]


class SortConfig(BaseModel):
    """[sort] section."""

    model_config = {"frozen": True}

    field: str = "group"


class GroupOrderConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    kinds: dict[str, KindConfig] = Field(default_factory=dict)
    orderings: dict[str, OrderingConfig] = Field(default_factory=dict)
    sort: SortConfig = Field(default_factory=SortConfig)
