"""Command: show the ranks of an ordering."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from grouporder.commands._base import GroupOrderCommand, split_order

if TYPE_CHECKING:
    from grouporder.commands._context import AppContext


@click.command(
    cls=GroupOrderCommand,
    examples="""\
  grouporder describe Triage
  grouporder describe Triage --order low,high,medium
  grouporder describe Triage --ordering support-queue""",
)
@click.argument("kind")
@click.option("--order", callback=split_order, help="Comma-separated group names in rank order.")
@click.option("--ordering", "ordering_name", default=None, help="Named ordering from config.")
@click.pass_obj
def describe(
    app: AppContext,
    kind: str,
    order: list[str] | None,
    ordering_name: str | None,
) -> None:
    """Show each group's rank under an ordering of KIND (default: declaration order)."""
    from grouporder.services.ordering import OrderingService

    app.emit(OrderingService(app.catalog).describe(kind, order=order, ordering=ordering_name))
