"""Command: drive a single rover from the command line."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roverctl.commands._base import RoverCommand, boundary_options

if TYPE_CHECKING:
    from roverctl.commands._context import AppContext


@click.command(
    cls=RoverCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  roverctl drive 0 0 N MMRMM
  roverctl drive -1 -1 S M
  roverctl drive 1 2 N LMLMLMLMM --grid 5 5
  roverctl drive 0 0 S MRM --grid 5 5 --wrap
  roverctl --json drive 3 3 E MMRMMRMRRM --grid 5 5""",
)
@click.argument("x", type=int)
@click.argument("y", type=int)
@click.argument("heading")
@click.argument("commands", default="")
@click.option(
    "--grid",
    nargs=2,
    type=click.IntRange(min=0),
    default=None,
    metavar="MAX_X MAX_Y",
    help="Bound the grid to 0..MAX_X, 0..MAX_Y (default: [grid] config, else unbounded).",
)
@boundary_options
@click.pass_obj
def drive(
    app: AppContext,
    x: int,
    y: int,
    heading: str,
    commands: str,
    grid: tuple[int, int] | None,
    boundary_policy: str | None,
) -> None:
    """Drive one rover from X Y HEADING through COMMANDS and print where it ends."""
    plateau = None
    if grid:
        from roverctl.domain.models import Plateau

        plateau = Plateau(max_x=grid[0], max_y=grid[1])

    svc = app.missions(boundary_policy)
    app.emit(svc.drive(f"{x} {y} {heading}", commands, plateau=plateau))
