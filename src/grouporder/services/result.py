"""Service results for grouporder operations.

``OrderingService`` answers ``list_kinds``, ``describe``, ``validate`` and
``sort`` with a ServiceResult; the ``sort`` command also builds one itself
when its input is not parseable JSON. Errors carry the domain codes
(``UNKNOWN_LABEL``, ``DUPLICATE_LABEL``, ``UNKNOWN_KIND``, ...) so ``--json``
callers can branch on them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Error code, human message and structured detail (positions, names)."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: False when ``error`` is set.
        op: Operation name, which selects the renderer (``"describe"``).
        data: Payload such as the resolved ``order`` or sorted ``items``.
        warnings: Non-fatal notes, written to stderr by the CLI.
        error: Set on failure.
        meta: Telemetry attached in verbose mode.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Build a failed result for *op*."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
