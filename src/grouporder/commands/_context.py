"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy catalog construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from grouporder.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from grouporder.config.settings import GroupOrderSettings
    from grouporder.services.catalog import KindCatalog
    from grouporder.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. The catalog is built
    lazily so ``--help`` and ``--version`` never generate kinds.
    """

    def __init__(self, settings: GroupOrderSettings) -> None:
        self.settings = settings
        self._catalog: KindCatalog | None = None

        from grouporder.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from grouporder.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def catalog(self) -> KindCatalog:
        """The kind catalog (created lazily on first access)."""
        if self._catalog is None:
            from grouporder.services.catalog import KindCatalog

            self._catalog = KindCatalog.from_settings(self.settings)
        return self._catalog

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
