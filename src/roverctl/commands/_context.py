"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the mission service and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from roverctl.domain.types import BoundaryPolicy, ErrorMode
from roverctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from roverctl.config.settings import RoverSettings
    from roverctl.services.mission import MissionService
    from roverctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: RoverSettings) -> None:
        self.settings = settings

        from roverctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from roverctl.services.telemetry import enable_telemetry

            enable_telemetry()

    def missions(
        self,
        boundary_policy: str | None = None,
        error_mode: str | None = None,
    ) -> MissionService:
        """Build a MissionService with per-command flag overrides applied."""
        from roverctl.services.mission import MissionService

        settings = self.settings.with_overrides(
            boundary_policy=BoundaryPolicy(boundary_policy) if boundary_policy else None,
            error_mode=ErrorMode(error_mode) if error_mode else None,
        )
        return MissionService(settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
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
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def read_lines(self, stream: TextIO, op: str) -> list[str]:
        """Read every line from *stream*, emitting an input error on failure."""
        try:
            return stream.read().splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            from roverctl.services.result import ServiceError, ServiceResult

            name = getattr(stream, "name", "<input>")
            self.emit(
                ServiceResult(
                    ok=False,
                    op=op,
                    error=ServiceError(
                        code="INPUT_ERROR",
                        message=f"Error reading {name}: {exc}",
                    ),
                )
            )
            raise  # emit() has already exited
