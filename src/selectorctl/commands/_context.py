"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Configures logging and owns result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from selectorctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from selectorctl.config.settings import SelectorSettings
    from selectorctl.services.result import ServiceResult
    from selectorctl.services.selector import SelectorService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: SelectorSettings) -> None:
        self.settings = settings
        self._service: SelectorService | None = None

        from selectorctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from selectorctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> SelectorService:
        """The selector service (created lazily on first access)."""
        if self._service is None:
            from selectorctl.services.selector import SelectorService

            self._service = SelectorService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr outside JSON mode.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            json_indent=self.settings.output.json_indent,
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
