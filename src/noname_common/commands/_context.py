"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns logging setup and result emission (stdout/stderr
routing plus exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from noname_common.config.logging import configure_logging
from noname_common.output.formatters import OutputSettings, format_result
from noname_common.services.telemetry import enable_telemetry
from noname_common.services.validation import ValidationService

if TYPE_CHECKING:
    from noname_common.config.models import NonameConfig
    from noname_common.config.settings import NonameSettings
    from noname_common.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: NonameSettings) -> None:
        self.settings = settings

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    def service(self, config: NonameConfig | None = None) -> ValidationService:
        """A ValidationService for *config*, defaulting to the loaded settings."""
        return ValidationService(config or self.settings.to_config())

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, normal return.
        * Failure: stderr, exit code 1.

        Warnings go to stderr in both cases unless JSON output carries them.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
            color=self.settings.output.color,
        )
        output = format_result(result, settings=settings)
        click.echo(output, err=not result.ok)
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if not result.ok:
            raise SystemExit(1)
