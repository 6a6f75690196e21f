"""Command: run a full mission from a file or stdin."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from roverctl.commands._base import RoverCommand, mission_options

if TYPE_CHECKING:
    from roverctl.commands._context import AppContext


@click.command(
    cls=RoverCommand,
    examples="""\
  roverctl run mission.txt
  printf '5 5\\n1 2 N\\nLMLMLMLMM\\n' | roverctl run
  roverctl run mission.txt --ignore-oob
  roverctl run mission.txt --stop-on-oob --collect-errors
  roverctl --json run mission.txt""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@mission_options
@click.pass_obj
def run(
    app: AppContext,
    source: TextIO,
    boundary_policy: str | None,
    error_mode: str | None,
) -> None:
    """Run every rover in SOURCE (default: stdin) and print final positions.

    SOURCE holds the plateau's upper-right corner on the first line, then
    one pair of lines per rover: a start position ("1 2 N") and a command
    string of L, R and M.
    """
    lines = app.read_lines(source, "run_mission")
    app.emit(app.missions(boundary_policy, error_mode).run(lines))
