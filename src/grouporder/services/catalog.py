"""KindCatalog — ordering kinds and named orderings declared in config.

Kinds are generated lazily, once per catalog, from ``[kinds.<Name>]``
sections. Named orderings from ``[orderings.<name>]`` are deserialized
through the kind's validating constructor on every lookup.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from grouporder.config.discovery import load_config
from grouporder.domain.kinds import GroupedOrderingBase, grouped_ordering

if TYPE_CHECKING:
    from grouporder.config.models import GroupOrderConfig
    from grouporder.config.settings import GroupOrderSettings

logger = logging.getLogger(__name__)

CATALOG_MODULE = "grouporder.catalog"


class CatalogError(LookupError):
    """A kind or named ordering is not declared."""

    code = "CATALOG_ERROR"

    def __init__(self, message: str, name: str, known: list[str]) -> None:
        super().__init__(message)
        self.message = message
        self.detail = {"name": name, "known": known}


class UnknownKindError(CatalogError):
    code = "UNKNOWN_KIND"


class UnknownOrderingError(CatalogError):
    code = "UNKNOWN_ORDERING"


class KindMismatchError(CatalogError):
    """A named ordering belongs to a different kind than requested."""

    code = "KIND_MISMATCH"


class KindCatalog:
    """Lookup surface over configured kinds and orderings."""

    def __init__(self, config: GroupOrderConfig) -> None:
        self._config = config
        self._kinds: dict[str, type[GroupedOrderingBase]] = {}

    @classmethod
    def from_settings(cls, settings: GroupOrderSettings) -> KindCatalog:
        return cls(settings.to_config())

    @classmethod
    def load(cls, path: Path | None = None, cwd: Path | None = None) -> KindCatalog:
        """Build a catalog from ``grouporder.toml`` (discovered when *path* is None)."""
        return cls(load_config(path, cwd))

    @property
    def default_field(self) -> str:
        return self._config.sort.field

    def kind_names(self) -> list[str]:
        return list(self._config.kinds)

    def ordering_names(self, kind: str | None = None) -> list[str]:
        """Named orderings, optionally restricted to one kind."""
        return [
            name
            for name, ordering in self._config.orderings.items()
            if kind is None or ordering.kind == kind
        ]

    def kind(self, name: str) -> type[GroupedOrderingBase]:
        """Return the generated kind *name*.

        Raises:
            UnknownKindError: If *name* is not declared.
            KindDefinitionError: If its declaration is malformed.
        """
        cached = self._kinds.get(name)
        if cached is not None:
            return cached

        declared = self._config.kinds.get(name)
        if declared is None:
            msg = f"No kind named '{name}'"
            raise UnknownKindError(msg, name, self.kind_names())

        kind = grouped_ordering(name, declared.groups, module=CATALOG_MODULE)
        self._kinds[name] = kind
        logger.debug("Loaded kind %s from config", name)
        return kind

    def ordering(self, name: str) -> GroupedOrderingBase:
        """Deserialize the named ordering *name*."""
        declared = self._config.orderings.get(name)
        if declared is None:
            msg = f"No ordering named '{name}'"
            raise UnknownOrderingError(msg, name, self.ordering_names())
        return self.kind(declared.kind).from_names(declared.order)

    def resolve(
        self,
        kind: str,
        *,
        order: list[str] | None = None,
        ordering: str | None = None,
    ) -> GroupedOrderingBase:
        """Pick an ordering of *kind*: explicit names, a named ordering, or the default."""
        kind_cls = self.kind(kind)
        if order is not None:
            return kind_cls.from_names(order)
        if ordering is not None:
            instance = self.ordering(ordering)
            if type(instance) is not kind_cls:
                msg = f"Ordering '{ordering}' belongs to {type(instance).__name__}, not {kind}"
                raise KindMismatchError(msg, ordering, self.ordering_names(kind))
            return instance
        return kind_cls.default()
