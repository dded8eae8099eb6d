"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Configures logging and owns result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linecmd.config.logging import configure_logging
from linecmd.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from linecmd.config.settings import LinecmdSettings
    from linecmd.services.parse import ParseService
    from linecmd.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: LinecmdSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def parse_service(self, strip_prefix: str | None = None) -> ParseService:
        """Build a ParseService; an explicit *strip_prefix* beats config."""
        from linecmd.services.parse import ParseService

        if strip_prefix:
            return ParseService(strip_prefix=strip_prefix)
        return ParseService.from_config(self.settings.parser)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
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
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
