"""Command: parse a mission without running it."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from roverctl.commands._base import RoverCommand

if TYPE_CHECKING:
    from roverctl.commands._context import AppContext


@click.command(
    cls=RoverCommand,
    examples="""\
  roverctl validate mission.txt
  roverctl validate mission.txt --collect-errors
  cat mission.txt | roverctl --json validate""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--collect-errors",
    "error_mode",
    flag_value="collect",
    help="Report every rover error instead of only the first.",
)
@click.pass_obj
def validate(app: AppContext, source: TextIO, error_mode: str | None) -> None:
    """Check that SOURCE is a well-formed mission."""
    lines = app.read_lines(source, "validate_mission")
    app.emit(app.missions(error_mode=error_mode).validate(lines))
