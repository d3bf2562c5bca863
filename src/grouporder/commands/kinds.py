"""Command: list configured kinds."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from grouporder.commands._base import GroupOrderCommand

if TYPE_CHECKING:
    from grouporder.commands._context import AppContext


@click.command(
    cls=GroupOrderCommand,
    examples="""\
  grouporder kinds
  grouporder --json kinds""",
)
@click.pass_obj
def kinds(app: AppContext) -> None:
    """List configured kinds, their groups, and named orderings."""
    from grouporder.services.ordering import OrderingService

    app.emit(OrderingService(app.catalog).list_kinds())
