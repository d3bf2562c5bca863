"""Ordering construction errors.

Every failure carries a stable ``code`` and a ``detail`` dict so the
service layer can surface it as a structured ``ServiceError``.

INVARIANT: Construction either yields a fully valid ordering or raises.
There is no partial-success mode.
"""

from __future__ import annotations

from typing import Any


class OrderingError(ValueError):
    """Base class for invalid ordering input."""

    code = "ORDERING_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail


class DuplicateLabelError(OrderingError):
    """A label appears more than once in a candidate permutation."""

    code = "DUPLICATE_LABEL"

    def __init__(self, kind: str, label: str, first: int, second: int) -> None:
        super().__init__(
            f"Found duplicate group '{label}' for {kind} at positions {first} and {second}",
            kind=kind,
            label=label,
            positions=[first, second],
        )
        self.label = label


class WrongCardinalityError(OrderingError):
    """A candidate permutation does not name every label exactly once."""

    code = "WRONG_CARDINALITY"

    def __init__(self, kind: str, expected: int, actual: int) -> None:
        super().__init__(
            f"Expected all {expected} groups of {kind}, got {actual}",
            kind=kind,
            expected=expected,
            actual=actual,
        )
        self.expected = expected
        self.actual = actual


class UnknownLabelError(OrderingError):
    """A value does not correspond to any label of the kind."""

    code = "UNKNOWN_LABEL"

    def __init__(self, kind: str, name: object, known: list[str]) -> None:
        super().__init__(
            f"Unknown group {name!r} for {kind}. Expected one of: {', '.join(known)}",
            kind=kind,
            name=str(name),
            known=known,
        )
        self.name = name


class OrderingTypeError(OrderingError, TypeError):
    """Serialized input is not a sequence of names."""

    code = "INVALID_INPUT"


class KindDefinitionError(OrderingError):
    """A kind declaration is malformed (definition-time failure)."""

    code = "INVALID_KIND"


class NotOrderableError(TypeError):
    """No item-to-group mapping exists for an item under a kind."""

    code = "NOT_ORDERABLE"
