"""Command interpreter — a deterministic fold over a command sequence.

Given a start position and an ordered sequence of commands, applies each
command to a Rover and returns the final state. Turns never fail. A
forward move whose destination is off the plateau is resolved by the
configured BoundaryPolicy:

- ``strict``: raise OutOfBoundsError.
- ``ignore``: skip the move and continue with the next command.
- ``stop``: stop executing; the current position is final.
- ``wrap``: re-enter from the opposite edge.

With no plateau the grid is unbounded and the policy never applies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from roverctl.domain.errors import InvalidCommandError, OutOfBoundsError
from roverctl.domain.models import Plateau, Position, Rover
from roverctl.domain.types import BoundaryPolicy, Command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Execution:
    """Outcome of running one rover's commands."""

    start: Position
    final: Position
    applied: int
    skipped: int = 0
    stopped: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "start": str(self.start),
            "final": str(self.final),
            "applied": self.applied,
            "skipped": self.skipped,
            "stopped": self.stopped,
        }


def parse_commands(text: str) -> tuple[Command, ...]:
    """Parse a command string such as ``"LMLMM"`` into Commands.

    Surrounding whitespace is stripped; matching is case-sensitive.
    """
    commands: list[Command] = []
    for index, char in enumerate(text.strip(), start=1):
        commands.append(_to_command(char, index))
    return tuple(commands)


def _to_command(char: str | Command, index: int) -> Command:
    if isinstance(char, Command):
        return char
    try:
        return Command(char)
    except ValueError:
        msg = f"Invalid instruction character: {char}"
        raise InvalidCommandError(msg, char=char, index=index) from None


def execute(
    start: Position,
    commands: Iterable[Command | str],
    *,
    plateau: Plateau | None = None,
    policy: BoundaryPolicy = BoundaryPolicy.STRICT,
    rover_index: int = 1,
) -> Execution:
    """Apply *commands* to a rover at *start* and return the outcome.

    Args:
        start: Initial rover position and heading.
        commands: Commands (or their single-letter strings) in order.
        plateau: Grid bounds; ``None`` for an unbounded grid.
        policy: How to resolve a move that would leave the plateau.
        rover_index: 1-based rover number used in error messages.

    Raises:
        InvalidCommandError: A command is not ``L``, ``R`` or ``M``.
        OutOfBoundsError: A move leaves the plateau under ``strict``.
    """
    if policy is BoundaryPolicy.WRAP and plateau is None:
        raise ValueError("wrap policy requires a plateau")

    rover = Rover(start)
    applied = 0
    skipped = 0

    for index, raw in enumerate(commands, start=1):
        command = _to_command(raw, index)

        if command is Command.LEFT:
            rover.turn_left()
        elif command is Command.RIGHT:
            rover.turn_right()
        else:
            target = rover.peek_move()
            if plateau is None or plateau.contains(target.x, target.y):
                rover.move()
            elif policy is BoundaryPolicy.STRICT:
                current = rover.position
                msg = (
                    f"Rover #{rover_index} instruction {index} out of bounds "
                    f"from {current.label()}"
                )
                raise OutOfBoundsError(
                    msg,
                    rover_index=rover_index,
                    instruction_index=index,
                    position=str(current),
                )
            elif policy is BoundaryPolicy.IGNORE:
                logger.debug("Rover #%d skipped move %d at %s", rover_index, index, rover.position)
                skipped += 1
                continue
            elif policy is BoundaryPolicy.STOP:
                logger.debug(
                    "Rover #%d stopped at move %d at %s", rover_index, index, rover.position
                )
                return Execution(
                    start=start,
                    final=rover.position,
                    applied=applied,
                    skipped=skipped,
                    stopped=True,
                )
            else:
                x, y = plateau.wrap(target.x, target.y)
                logger.debug("Rover #%d wrapped to (%d,%d)", rover_index, x, y)
                rover.place(Position(x=x, y=y, heading=target.heading))
        applied += 1

    return Execution(start=start, final=rover.position, applied=applied, skipped=skipped)
