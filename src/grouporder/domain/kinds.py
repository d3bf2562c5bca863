"""Ordering-kind generator and the shared ordering base.

:func:`grouped_ordering` is called once per kind at import time. It
builds a closed label enum (``<Name>Group``) and an ordering type over
it. All construction paths (default, explicit, positional helper,
deserialization) funnel into ``GroupedOrderingBase.__init__``, so the
bijection check is written exactly once for every kind.

Serialized names are the kebab-case spellings of the declared
identifiers: ``HighPriority`` serializes as ``"high-priority"``.

INVARIANT: An ordering instance is a total bijection between the kind's
labels and ranks ``0..n-1``, and is never mutated after construction.
"""

from __future__ import annotations

import json
import keyword
import logging
import re
import types
from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping, Sequence
from enum import StrEnum
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from grouporder.domain.contracts import GroupedOrdering
from grouporder.domain.errors import (
    DuplicateLabelError,
    KindDefinitionError,
    OrderingTypeError,
    UnknownLabelError,
    WrongCardinalityError,
)

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_kebab_case(identifier: str) -> str:
    """Return the serialized name for a declared group identifier."""
    return _CAMEL_BOUNDARY.sub("-", identifier).lower().replace("_", "-")


class GroupedOrderingBase(GroupedOrdering):
    """Immutable permutation of one kind's labels.

    Never instantiated directly: :func:`grouped_ordering` derives one
    subclass per kind and fills in the class attributes below.

    Attributes:
        Group: The kind's closed label enum.
        GROUPS: Labels in declaration order (the default permutation).
    """

    Group: ClassVar[type[StrEnum]]
    GROUPS: ClassVar[tuple[StrEnum, ...]]
    _BY_NAME: ClassVar[dict[str, StrEnum]]
    _DEFAULT: ClassVar[GroupedOrderingBase]

    __slots__ = ("_groups", "_ranks")

    def __init__(self, groups: Iterable[StrEnum]) -> None:
        cls = type(self)
        if not hasattr(cls, "Group"):
            msg = "GroupedOrderingBase has no groups; build kinds with grouped_ordering()"
            raise TypeError(msg)
        if isinstance(groups, str):
            msg = f"{cls.__name__} expects a sequence of groups, not a single string"
            raise OrderingTypeError(msg, kind=cls.__name__)

        candidate = tuple(groups)
        for group in candidate:
            if not isinstance(group, cls.Group):
                raise UnknownLabelError(cls.__name__, group, cls.names())

        ranks: dict[StrEnum, int] = {}
        for index, group in enumerate(candidate):
            if group in ranks:
                raise DuplicateLabelError(cls.__name__, group.value, ranks[group], index)
            ranks[group] = index

        if len(ranks) != len(cls.GROUPS):
            raise WrongCardinalityError(cls.__name__, len(cls.GROUPS), len(ranks))

        object.__setattr__(self, "_groups", candidate)
        object.__setattr__(self, "_ranks", ranks)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __copy__(self) -> GroupedOrderingBase:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> GroupedOrderingBase:
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        # Rebuilt from serialized names so unpickling re-runs validation.
        return (type(self).from_names, (self.to_names(),))

    # --- Construction -----------------------------------------------------

    @classmethod
    def default(cls) -> GroupedOrderingBase:
        """The identity permutation (declaration order)."""
        return cls._DEFAULT

    @classmethod
    def of(cls, *groups: StrEnum | str) -> GroupedOrderingBase:
        """Build an ordering from labels or declared identifiers.

        ``Triage.of("High", "Low", "Medium")`` is shorthand for
        ``Triage([Triage.Group.High, ...])`` and validates the same way.
        """
        resolved: list[StrEnum] = []
        for group in groups:
            if isinstance(group, cls.Group):
                resolved.append(group)
            elif isinstance(group, str) and group in cls.Group.__members__:
                resolved.append(cls.Group[group])
            else:
                raise UnknownLabelError(cls.__name__, group, list(cls.Group.__members__))
        return cls(resolved)

    @classmethod
    def from_names(cls, names: Sequence[str]) -> GroupedOrderingBase:
        """Deserialize from serialized names in rank order.

        Requires exactly the full label set: unknown names, repeats and
        subsets are all rejected.
        """
        if isinstance(names, (str, bytes, Mapping)) or not isinstance(names, Sequence):
            msg = f"{cls.__name__} expects a list of group names, got {type(names).__name__}"
            raise OrderingTypeError(msg, kind=cls.__name__)
        return cls(cls.parse_group(name) for name in names)

    @classmethod
    def from_json(cls, text: str | bytes) -> GroupedOrderingBase:
        """Deserialize from a JSON array of names."""
        try:
            data = json.loads(text)
        except ValueError as exc:
            msg = f"Invalid JSON for {cls.__name__}: {exc}"
            raise OrderingTypeError(msg, kind=cls.__name__) from exc
        return cls.from_names(data)

    @classmethod
    def parse_group(cls, name: object) -> StrEnum:
        """Resolve one serialized name to its label."""
        group = cls._BY_NAME.get(name) if isinstance(name, str) else None
        if group is None:
            raise UnknownLabelError(cls.__name__, name, cls.names())
        return group

    @classmethod
    def names(cls) -> list[str]:
        """Serialized names in declaration order."""
        return [group.value for group in cls.GROUPS]

    # --- Queries ----------------------------------------------------------

    @property
    def groups(self) -> tuple[StrEnum, ...]:
        """Labels in rank order."""
        return self._groups

    def rank(self, group: Hashable) -> int:
        """Return the 0-indexed rank of *group*.

        Only labels of this kind have a rank; serialized names go through
        :meth:`parse_group` first.
        """
        if not isinstance(group, type(self).Group):
            raise UnknownLabelError(type(self).__name__, group, self.names())
        return self._ranks[group]

    def label_at(self, rank: int) -> StrEnum:
        """Return the label at *rank*. Negative ranks are out of range."""
        if isinstance(rank, bool) or not isinstance(rank, int):
            msg = f"rank must be an int, got {type(rank).__name__}"
            raise TypeError(msg)
        if not 0 <= rank < len(self._groups):
            msg = f"rank {rank} out of range for {type(self).__name__} (0..{len(self._groups) - 1})"
            raise IndexError(msg)
        return self._groups[rank]

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, int) and not isinstance(key, bool):
            return self.label_at(key)
        return self.rank(key)

    def compare(self, a: Hashable, b: Hashable) -> int:
        rank_a, rank_b = self.rank(a), self.rank(b)
        return (rank_a > rank_b) - (rank_a < rank_b)

    def sort_key(self) -> Callable[[Hashable], int]:
        """Key function mapping a label to its rank."""
        return self.rank

    # --- Serialization ----------------------------------------------------

    def to_names(self) -> list[str]:
        """Serialized form: names in rank order."""
        return [group.value for group in self._groups]

    def to_json(self) -> str:
        return json.dumps(self.to_names())

    @classmethod
    def _validate(cls, value: Any) -> GroupedOrderingBase:
        if isinstance(value, cls):
            return value
        return cls.from_names(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda ordering: ordering.to_names()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        schema: core_schema.CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        size = len(cls.GROUPS)
        return {
            "type": "array",
            "items": {"enum": cls.names()},
            "minItems": size,
            "maxItems": size,
            "uniqueItems": True,
        }

    # --- Dunder protocol --------------------------------------------------

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[StrEnum]:
        return iter(self._groups)

    def __contains__(self, group: object) -> bool:
        return isinstance(group, type(self).Group)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._groups == other._groups  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._groups))

    def __repr__(self) -> str:
        return f"{type(self).__name__}.of({', '.join(group.name for group in self._groups)})"


def _check_definition(name: str, groups: Sequence[str]) -> list[str]:
    """Validate a kind declaration, returning the groups as a list."""
    if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
        raise KindDefinitionError(f"Invalid kind name: {name!r}", kind=str(name))
    if isinstance(groups, str) or not isinstance(groups, Iterable):
        msg = f"Groups for {name} must be a sequence of identifiers"
        raise KindDefinitionError(msg, kind=name)

    declared = list(groups)
    if not declared:
        raise KindDefinitionError(f"{name} must declare at least one group", kind=name)

    seen: dict[str, str] = {}
    for group in declared:
        if (
            not isinstance(group, str)
            or not group.isidentifier()
            or keyword.iskeyword(group)
            or group.startswith("_")
        ):
            msg = f"Invalid group {group!r} for {name}: expected a public identifier"
            raise KindDefinitionError(msg, kind=name, group=str(group))
        if group in seen.values():
            raise KindDefinitionError(f"Duplicate group {group!r} in {name}", kind=name, group=group)
        serialized = to_kebab_case(group)
        if serialized in seen:
            msg = (
                f"Groups {seen[serialized]!r} and {group!r} of {name} "
                f"both serialize as {serialized!r}"
            )
            raise KindDefinitionError(msg, kind=name, group=group)
        seen[serialized] = group
    return declared


def grouped_ordering(
    name: str,
    groups: Sequence[str],
    *,
    module: str | None = None,
) -> type[GroupedOrderingBase]:
    """Generate an ordering kind named *name* over *groups*.

    Args:
        name: Class name of the generated ordering type. The label enum
            is named ``f"{name}Group"``.
        groups: Distinct identifiers in declaration (default) order.
        module: ``__module__`` for the generated types. Defaults to
            ``grouporder.domain.kinds``; pass the defining module's
            ``__name__`` so the kind pickles by reference.

    Raises:
        KindDefinitionError: If the declaration is malformed.

    Usage::

        Triage = grouped_ordering("Triage", ["High", "Medium", "Low"], module=__name__)
        Triage.default()                      # High, Medium, Low
        Triage.of("Low", "High", "Medium")    # explicit permutation
        Triage.from_names(["low", "high", "medium"])
    """
    declared = _check_definition(name, groups)
    module = module or __name__

    try:
        group_enum = StrEnum(  # type: ignore[call-overload]
            f"{name}Group",
            [(group, to_kebab_case(group)) for group in declared],
            module=module,
            qualname=f"{name}Group",
        )
    except (TypeError, ValueError) as exc:
        msg = f"Cannot build groups for {name}: {exc}"
        raise KindDefinitionError(msg, kind=name) from exc

    members = tuple(group_enum)
    namespace = {
        "__slots__": (),
        "__module__": module,
        "__qualname__": name,
        "__doc__": f"Grouped ordering over {', '.join(declared)}.",
        "Group": group_enum,
        "GROUPS": members,
        "_BY_NAME": {member.value: member for member in members},
    }
    kind = types.new_class(name, (GroupedOrderingBase,), exec_body=lambda ns: ns.update(namespace))
    kind._DEFAULT = kind(members)

    logger.debug("Generated grouped ordering %s with %d groups", name, len(members))
    return kind
