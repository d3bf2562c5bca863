"""Command: validate a serialized permutation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from grouporder.commands._base import GroupOrderCommand

if TYPE_CHECKING:
    from grouporder.commands._context import AppContext


@click.command(
    cls=GroupOrderCommand,
    examples="""\
  grouporder validate Triage low high medium
  grouporder --json validate Triage low low medium""",
)
@click.argument("kind")
@click.argument("names", nargs=-1)
@click.pass_obj
def validate(app: AppContext, kind: str, names: tuple[str, ...]) -> None:
    """Check that NAMES list every group of KIND exactly once."""
    from grouporder.services.ordering import OrderingService

    app.emit(OrderingService(app.catalog).validate(kind, list(names)))
