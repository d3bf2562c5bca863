"""Subcommand modules for grouporder.

Provides register_commands() which uses deferred imports to keep
``grouporder --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from grouporder.commands.describe import describe
    from grouporder.commands.kinds import kinds
    from grouporder.commands.sort import sort
    from grouporder.commands.validate import validate

    cli.add_command(kinds)
    cli.add_command(describe)
    cli.add_command(validate)
    cli.add_command(sort)
