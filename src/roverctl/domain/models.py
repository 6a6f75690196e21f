"""Position, plateau, rover, and mission models.

Positions, plateaus, plans, and missions are frozen Pydantic models.
The Rover is the only mutable object: it owns a Position and replaces it
each time a command is applied.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from roverctl.domain.types import Command, Heading


class Position(BaseModel):
    """Immutable ``(x, y, heading)`` rover state."""

    model_config = {"frozen": True}

    x: int
    y: int
    heading: Heading

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.heading}"

    def label(self) -> str:
        """Compact ``(x,y,H)`` form used in error messages."""
        return f"({self.x},{self.y},{self.heading})"

    def turned(self, heading: Heading) -> Position:
        return Position(x=self.x, y=self.y, heading=heading)

    def advanced(self) -> Position:
        """Position one unit forward along the current heading."""
        dx, dy = self.heading.delta
        return Position(x=self.x + dx, y=self.y + dy, heading=self.heading)


class Plateau(BaseModel):
    """Inclusive rectangular grid from ``(0, 0)`` to ``(max_x, max_y)``."""

    model_config = {"frozen": True}

    max_x: int = Field(ge=0)
    max_y: int = Field(ge=0)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x <= self.max_x and 0 <= y <= self.max_y

    def wrap(self, x: int, y: int) -> tuple[int, int]:
        """Map ``(x, y)`` onto the plateau as a torus."""
        return x % (self.max_x + 1), y % (self.max_y + 1)


class RoverPlan(BaseModel):
    """A rover's start position and the commands it will execute."""

    model_config = {"frozen": True}

    start: Position
    commands: tuple[Command, ...] = ()

    @property
    def instructions(self) -> str:
        return "".join(c.value for c in self.commands)


class Mission(BaseModel):
    """A plateau and the rovers deployed on it, in execution order."""

    model_config = {"frozen": True}

    plateau: Plateau
    plans: list[RoverPlan] = Field(default_factory=list)


class Rover:
    """Mutable rover that owns a Position.

    Only command execution mutates it. ``peek_move`` lets the interpreter
    inspect a destination before committing to it.
    """

    def __init__(self, position: Position) -> None:
        self.position = position

    def turn_left(self) -> None:
        self.position = self.position.turned(self.position.heading.left())

    def turn_right(self) -> None:
        self.position = self.position.turned(self.position.heading.right())

    def peek_move(self) -> Position:
        return self.position.advanced()

    def move(self) -> None:
        self.position = self.peek_move()

    def place(self, position: Position) -> None:
        """Set the rover down at *position* (used by the wrap policy)."""
        self.position = position
