"""grouporder — closed group kinds with user-chosen sort orderings."""

from grouporder.domain.contracts import GroupedOrderable, GroupedOrdering, orderable, register_orderable
from grouporder.domain.errors import (
    DuplicateLabelError,
    KindDefinitionError,
    NotOrderableError,
    OrderingError,
    OrderingTypeError,
    UnknownLabelError,
    WrongCardinalityError,
)
from grouporder.domain.kinds import GroupedOrderingBase, grouped_ordering
from grouporder.domain.sorting import (
    group_by_grouped_ordering,
    sort_by_grouped_ordering,
    sorted_by_grouped_ordering,
)

__version__ = "0.1.0"

__all__ = [
    "DuplicateLabelError",
    "GroupedOrderable",
    "GroupedOrdering",
    "GroupedOrderingBase",
    "KindDefinitionError",
    "NotOrderableError",
    "OrderingError",
    "OrderingTypeError",
    "UnknownLabelError",
    "WrongCardinalityError",
    "__version__",
    "group_by_grouped_ordering",
    "grouped_ordering",
    "orderable",
    "register_orderable",
    "sort_by_grouped_ordering",
    "sorted_by_grouped_ordering",
]
