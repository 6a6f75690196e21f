"""Headings, commands, and the policy enums that govern execution.

Rotation and movement are lookup tables, in the same spirit as a
state-transition map: every heading has exactly one left neighbour,
one right neighbour, and one unit delta.
"""

from __future__ import annotations

from enum import StrEnum


class Heading(StrEnum):
    """Cardinal direction a rover currently faces."""

    N = "N"
    E = "E"
    S = "S"
    W = "W"

    def left(self) -> Heading:
        """Heading after a 90° counter-clockwise turn."""
        return Heading(LEFT_OF[self.value])

    def right(self) -> Heading:
        """Heading after a 90° clockwise turn."""
        return Heading(RIGHT_OF[self.value])

    @property
    def delta(self) -> tuple[int, int]:
        """Unit ``(dx, dy)`` for one step forward."""
        return DELTAS[self.value]


class Command(StrEnum):
    """Single atomic instruction altering rover state."""

    LEFT = "L"
    RIGHT = "R"
    MOVE = "M"


class BoundaryPolicy(StrEnum):
    """What a forward move does when its destination is off the plateau."""

    STRICT = "strict"
    IGNORE = "ignore"
    STOP = "stop"
    WRAP = "wrap"


class ErrorMode(StrEnum):
    """Whether a mission run halts at the first error or reports them all."""

    FAIL_FAST = "fail-fast"
    COLLECT = "collect"


# --- Lookup tables ---

LEFT_OF: dict[str, str] = {
    "N": "W",
    "W": "S",
    "S": "E",
    "E": "N",
}

RIGHT_OF: dict[str, str] = {
    "N": "E",
    "E": "S",
    "S": "W",
    "W": "N",
}

DELTAS: dict[str, tuple[int, int]] = {
    "N": (0, 1),
    "E": (1, 0),
    "S": (0, -1),
    "W": (-1, 0),
}

INVERSE: dict[str, str] = {
    "L": "R",
    "R": "L",
}


def invert_rotations(commands: str) -> str:
    """Return the rotation sequence that undoes *commands*.

    Only ``L`` and ``R`` are invertible this way; ``M`` characters are dropped.
    """
    return "".join(INVERSE[c] for c in reversed(commands) if c in INVERSE)
