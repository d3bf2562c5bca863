"""Command: stably sort JSON records by group."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TextIO

import click

from grouporder.commands._base import GroupOrderCommand, split_order
from grouporder.services.result import ServiceResult

if TYPE_CHECKING:
    from grouporder.commands._context import AppContext


def read_records(stream: TextIO) -> list[Any]:
    """Read a JSON array, or JSON lines, from *stream*.

    Raises:
        ValueError: If the input is not valid JSON of either shape.
    """
    text = stream.read().strip()
    if not text:
        return []
    if text.startswith("["):
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError("Expected a JSON array")
        return data
    return [json.loads(line) for line in text.splitlines() if line.strip()]


@click.command(
    cls=GroupOrderCommand,
    examples="""\
  grouporder sort Triage tickets.json --field priority
  cat tickets.jsonl | grouporder -q sort Triage --order low,high,medium
  grouporder sort Triage tickets.json --ordering support-queue""",
)
@click.argument("kind")
@click.argument("source", type=click.File("r"), default="-")
@click.option("--field", default=None, help="Record field holding the group name.")
@click.option("--order", callback=split_order, help="Comma-separated group names in rank order.")
@click.option("--ordering", "ordering_name", default=None, help="Named ordering from config.")
@click.pass_obj
def sort(
    app: AppContext,
    kind: str,
    source: TextIO,
    field: str | None,
    order: list[str] | None,
    ordering_name: str | None,
) -> None:
    """Sort records from SOURCE (default: stdin) by their group under KIND."""
    from grouporder.services.ordering import OrderingService

    try:
        records = read_records(source)
    except ValueError as exc:
        app.emit(ServiceResult.failure("sort", "INVALID_JSON", f"Cannot parse records: {exc}"))
        return

    app.emit(
        OrderingService(app.catalog).sort_records(
            kind,
            records,
            field=field,
            order=order,
            ordering=ordering_name,
        )
    )
