"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy Store initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cardflow.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from cardflow.config.settings import CardflowSettings
    from cardflow.infrastructure.store import Store
    from cardflow.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is lazily initialized on first use so ``--help`` and
    ``--version`` never touch the database.
    """

    def __init__(self, settings: CardflowSettings) -> None:
        self.settings = settings
        self._store: Store | None = None

        from cardflow.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            log_sql=settings.log_sql,
        )

        if settings.verbose:
            from cardflow.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def store(self) -> Store:
        """The store instance (created lazily on first access)."""
        if self._store is None:
            from cardflow.infrastructure.store import Store

            self._store = Store(self.settings)
        return self._store

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def render(self, result: ServiceResult) -> None:
        """Print a ServiceResult without exiting (used by the interactive menu)."""
        output = format_result(result, settings=self.output_settings)
        click.echo(output, err=not result.ok)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        self.render(result)
        if result.ok:
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            raise SystemExit(1)
