"""Stable sorting of items through a grouped ordering.

Each item is mapped to a label once (explicit *key*, a self-describing
:class:`GroupedOrderable`, or a registered adapter), then items are
ordered by comparing labels with ``ordering.compare``.

INVARIANT: Sorting is stable. Items mapped to the same label keep their
relative input order.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Hashable, Iterable
from typing import TYPE_CHECKING, Any, TypeVar

from grouporder.domain.contracts import GroupedOrdering, label_of

if TYPE_CHECKING:
    from grouporder.domain.kinds import GroupedOrderingBase

T = TypeVar("T")


def _labelled(
    items: Iterable[T],
    ordering: GroupedOrdering,
    key: Callable[[Any], Hashable] | None,
) -> list[tuple[Hashable, T]]:
    # Labels are computed up front so each item's mapping runs exactly once.
    if key is None:
        kind = type(ordering)
        return [(label_of(item, kind), item) for item in items]
    return [(key(item), item) for item in items]


def _sorted_pairs(
    items: Iterable[T],
    ordering: GroupedOrdering,
    key: Callable[[Any], Hashable] | None,
) -> list[tuple[Hashable, T]]:
    pairs = _labelled(items, ordering, key)
    by_label = functools.cmp_to_key(ordering.compare)
    pairs.sort(key=lambda pair: by_label(pair[0]))
    return pairs


def sort_by_grouped_ordering(
    items: list[T],
    ordering: GroupedOrdering,
    *,
    key: Callable[[T], Hashable] | None = None,
) -> None:
    """Sort *items* in place by their labels under *ordering*.

    Args:
        items: Mutable list to reorder.
        ordering: An ordering instance of the kind the items map into.
        key: Optional item-to-label function. Without it, items must be
            :class:`GroupedOrderable` or have a registered adapter.

    Raises:
        NotOrderableError: If an item has no mapping for the kind.
    """
    items[:] = [item for _, item in _sorted_pairs(items, ordering, key)]


def sorted_by_grouped_ordering(
    items: Iterable[T],
    ordering: GroupedOrdering,
    *,
    key: Callable[[T], Hashable] | None = None,
) -> list[T]:
    """Return a new stably sorted list; *items* is left untouched."""
    return [item for _, item in _sorted_pairs(items, ordering, key)]


def group_by_grouped_ordering(
    items: Iterable[T],
    ordering: GroupedOrderingBase,
    *,
    key: Callable[[T], Hashable] | None = None,
) -> list[tuple[Hashable, list[T]]]:
    """Bucket items by label, buckets in rank order.

    Every label of the kind gets a bucket, empty or not. Items inside a
    bucket keep their input order.
    """
    buckets: dict[Hashable, list[T]] = {group: [] for group in ordering.groups}
    for label, item in _labelled(items, ordering, key):
        buckets[ordering.label_at(ordering.rank(label))].append(item)
    return list(buckets.items())
