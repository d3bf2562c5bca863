"""Capability contracts — "is an ordering" and "is orderable under an ordering".

A GroupedOrdering compares two labels of one kind. Items become
orderable under a kind either by subclassing :class:`GroupedOrderable`
or through an adapter registered for ``(item type, kind)``. Adapters
cover types the caller does not own (``int``, ``dict``, third-party
models).

INVARIANT: Item-to-label mappings are pure. The same item always yields
the same label for a given kind.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable
from typing import Any, TypeVar

from grouporder.domain.errors import NotOrderableError

T = TypeVar("T")

Mapper = Callable[[Any], Hashable]


class GroupedOrdering(ABC):
    """Strict total order over the full label set of one kind."""

    __slots__ = ()

    @abstractmethod
    def compare(self, a: Hashable, b: Hashable) -> int:
        """Return -1, 0 or 1 as *a* ranks before, with, or after *b*."""
        ...


class GroupedOrderable(ABC):
    """Item type that maps itself to a label of a given kind."""

    @abstractmethod
    def group_for(self, kind: type[GroupedOrdering]) -> Hashable:
        """Return this item's label under *kind*.

        Implementations raise :class:`NotOrderableError` for kinds they
        do not support.
        """
        ...


ORDERABLE_REGISTRY: dict[tuple[type, type[GroupedOrdering]], Mapper] = {}


def register_orderable(item_type: type, kind: type[GroupedOrdering], mapper: Mapper) -> None:
    """Register *mapper* as the label function for *item_type* under *kind*."""
    ORDERABLE_REGISTRY[(item_type, kind)] = mapper


def orderable(item_type: type, kind: type[GroupedOrdering]) -> Callable[[T], T]:
    """Decorator form of :func:`register_orderable`.

    Usage::

        @orderable(int, Triage)
        def _triage_for_int(value: int) -> Triage.Group:
            ...
    """

    def decorator(mapper: T) -> T:
        register_orderable(item_type, kind, mapper)  # type: ignore[arg-type]
        return mapper

    return decorator


def find_mapper(item_type: type, kind: type[GroupedOrdering]) -> Mapper | None:
    """Look up a registered adapter, walking *item_type*'s MRO."""
    for cls in item_type.__mro__:
        mapper = ORDERABLE_REGISTRY.get((cls, kind))
        if mapper is not None:
            return mapper
    return None


def label_of(item: object, kind: type[GroupedOrdering]) -> Hashable:
    """Map *item* to its label under *kind*.

    Self-describing items (:class:`GroupedOrderable`) take precedence
    over registered adapters.
    """
    if isinstance(item, GroupedOrderable):
        return item.group_for(kind)
    mapper = find_mapper(type(item), kind)
    if mapper is None:
        msg = f"{type(item).__name__} is not orderable under {kind.__name__}"
        raise NotOrderableError(msg)
    return mapper(item)
