"""OrderingService — describe, validate, and sort through configured kinds."""

from __future__ import annotations

from collections import Counter
from typing import Any

from grouporder.domain.errors import OrderingError
from grouporder.domain.sorting import sorted_by_grouped_ordering
from grouporder.services.base import BaseService
from grouporder.services.catalog import CatalogError
from grouporder.services.result import ServiceResult
from grouporder.services.telemetry import get_current_span, trace_span, traced


class OrderingService(BaseService):
    """Operations over the kinds and orderings of one catalog."""

    @traced
    def list_kinds(self) -> ServiceResult:
        """List every configured kind with its groups and named orderings."""
        items: list[dict[str, Any]] = []
        try:
            for name in self._catalog.kind_names():
                kind = self._catalog.kind(name)
                items.append(
                    {
                        "name": name,
                        "groups": kind.names(),
                        "orderings": self._catalog.ordering_names(name),
                    }
                )
        except (OrderingError, CatalogError) as exc:
            return self._failure("list_kinds", exc)
        return ServiceResult(ok=True, op="list_kinds", data={"items": items, "count": len(items)})

    @traced
    def describe(
        self,
        kind: str,
        *,
        order: list[str] | None = None,
        ordering: str | None = None,
    ) -> ServiceResult:
        """Show the resolved permutation of *kind* and each group's rank."""
        try:
            instance = self._catalog.resolve(kind, order=order, ordering=ordering)
        except (OrderingError, CatalogError) as exc:
            return self._failure("describe", exc)

        names = instance.to_names()
        return ServiceResult(
            ok=True,
            op="describe",
            data={
                "kind": kind,
                "order": names,
                "ranks": {name: rank for rank, name in enumerate(names)},
                "is_default": instance == type(instance).default(),
            },
        )

    @traced
    def validate(self, kind: str, names: list[str]) -> ServiceResult:
        """Check that *names* is a full permutation of *kind*."""
        try:
            instance = self._catalog.kind(kind).from_names(names)
        except (OrderingError, CatalogError) as exc:
            return self._failure("validate", exc)
        return ServiceResult(
            ok=True,
            op="validate",
            data={"kind": kind, "order": instance.to_names(), "valid": True},
        )

    @traced
    def sort_records(
        self,
        kind: str,
        records: list[Any],
        *,
        field: str | None = None,
        order: list[str] | None = None,
        ordering: str | None = None,
    ) -> ServiceResult:
        """Stably sort JSON objects by the group named in *field*.

        Args:
            kind: Configured kind the records' groups belong to.
            records: JSON objects; each must carry *field*.
            field: Record key holding the group name. Defaults to the
                ``[sort] field`` setting.
            order: Explicit permutation (serialized names).
            ordering: Named ordering from config.
        """
        op = "sort"
        field = field or self._catalog.default_field

        with trace_span("resolve_ordering"):
            try:
                instance = self._catalog.resolve(kind, order=order, ordering=ordering)
            except (OrderingError, CatalogError) as exc:
                return self._failure(op, exc)

        for index, record in enumerate(records):
            if not isinstance(record, dict):
                return ServiceResult.failure(
                    op, "INVALID_RECORD", f"Record {index} is not a JSON object", index=index
                )
            if field not in record:
                return ServiceResult.failure(
                    op,
                    "MISSING_FIELD",
                    f"Record {index} has no '{field}' field",
                    index=index,
                    field=field,
                )

        kind_cls = type(instance)
        with trace_span("sort"):
            try:
                items = sorted_by_grouped_ordering(
                    records,
                    instance,
                    key=lambda record: kind_cls.parse_group(record[field]),
                )
            except OrderingError as exc:
                return self._failure(op, exc)

        span = get_current_span()
        if span is not None:
            span.annotate("records", len(items))

        counts = Counter(str(record[field]) for record in items)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "kind": kind,
                "field": field,
                "order": instance.to_names(),
                "group_counts": {name: counts.get(name, 0) for name in instance.to_names()},
                "items": items,
                "count": len(items),
            },
        )
