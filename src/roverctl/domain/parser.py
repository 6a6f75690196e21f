"""Mission input parsing.

Input format (blank lines are ignored)::

    5 5          <- plateau upper-right corner
    1 2 N        <- rover #1 start
    LMLMLMLMM    <- rover #1 instructions
    3 3 E        <- rover #2 start
    MMRMMRMRRM   <- rover #2 instructions

Rover numbers in error messages are 1-based.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from roverctl.domain.errors import ParseError
from roverctl.domain.models import Mission, Plateau, Position, RoverPlan
from roverctl.domain.types import Command, Heading

_INSTRUCTIONS_RE = re.compile(r"[LRM]+")
_INT_RE = re.compile(r"[+-]?\d+")


def parse_mission(lines: Iterable[str], *, collect: bool = False) -> Mission:
    """Parse mission lines into a Mission.

    Args:
        lines: Raw input lines (trailing newlines are fine).
        collect: Gather every rover-level error instead of stopping at the
            first one. Plateau and pairing errors are always immediate.

    Raises:
        ParseError: The input is malformed. ``errors`` lists every message.
    """
    content = [line for line in lines if line is not None and line.strip()]
    if not content:
        raise ParseError("Input cannot be empty")

    plateau = _parse_plateau(content[0])
    rover_lines = content[1:]
    if len(rover_lines) % 2 != 0:
        raise ParseError(
            "Rover specifications must come in pairs (position line + instructions line)"
        )

    plans: list[RoverPlan] = []
    errors: list[str] = []
    for offset in range(0, len(rover_lines), 2):
        rover_index = offset // 2 + 1
        try:
            plans.append(
                _parse_plan(rover_lines[offset], rover_lines[offset + 1], rover_index, plateau)
            )
        except ParseError as exc:
            if not collect:
                raise
            errors.extend(exc.errors)

    if errors:
        raise ParseError(errors[0], errors=errors)
    return Mission(plateau=plateau, plans=plans)


def parse_position(text: str, rover_index: int = 1) -> Position:
    """Parse a ``"X Y H"`` start position."""
    parts = text.split()
    if len(parts) != 3:
        raise ParseError(
            f'Rover #{rover_index} position invalid (expected "X Y HEADING"): "{text}"'
        )
    if not (_INT_RE.fullmatch(parts[0]) and _INT_RE.fullmatch(parts[1])):
        raise ParseError(
            f'Rover #{rover_index} position invalid (expected "X Y HEADING"): "{text}"'
        )
    x, y = int(parts[0]), int(parts[1])
    try:
        heading = Heading(parts[2])
    except ValueError:
        raise ParseError(
            f'Rover #{rover_index} invalid heading (expected N, E, S, or W): "{parts[2]}"'
        ) from None
    return Position(x=x, y=y, heading=heading)


def _parse_plateau(line: str) -> Plateau:
    parts = line.split()
    invalid = f'Plateau line invalid (expected "X Y"): "{line}"'
    if len(parts) != 2:
        raise ParseError(invalid)
    if not (_INT_RE.fullmatch(parts[0]) and _INT_RE.fullmatch(parts[1])):
        raise ParseError(invalid)
    max_x, max_y = int(parts[0]), int(parts[1])
    if max_x < 0 or max_y < 0:
        raise ParseError(f"Plateau coordinates must be non-negative: {max_x} {max_y}")
    return Plateau(max_x=max_x, max_y=max_y)


def _parse_instructions(line: str, rover_index: int) -> tuple[Command, ...]:
    text = line.strip()
    if not text:
        raise ParseError(f"Rover #{rover_index} instructions cannot be empty")
    if not _INSTRUCTIONS_RE.fullmatch(text):
        raise ParseError(
            f'Rover #{rover_index} invalid instructions (expected only L, R, M): "{text}"'
        )
    return tuple(Command(c) for c in text)


def _parse_plan(
    position_line: str,
    instructions_line: str,
    rover_index: int,
    plateau: Plateau,
) -> RoverPlan:
    start = parse_position(position_line.strip(), rover_index)
    commands = _parse_instructions(instructions_line, rover_index)
    if not plateau.contains(start.x, start.y):
        raise ParseError(
            f"Rover #{rover_index} start out of bounds: ({start.x},{start.y}) "
            f"> plateau ({plateau.max_x},{plateau.max_y})"
        )
    return RoverPlan(start=start, commands=commands)
