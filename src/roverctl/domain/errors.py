"""Domain exceptions.

Raised synchronously at the point of failure. The service layer converts
them into failed ServiceResults; they never reach the CLI directly.
"""

from __future__ import annotations


class RoverError(Exception):
    """Base class for all rover domain errors."""

    code = "ROVER_ERROR"


class ParseError(RoverError):
    """Mission or position input is malformed.

    ``errors`` holds every message when several problems were collected;
    for a single failure it is a one-element list.
    """

    code = "PARSE_ERROR"

    def __init__(self, message: str, *, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or [message]


class InvalidCommandError(RoverError):
    """A command character outside ``L``, ``R``, ``M``."""

    code = "INVALID_COMMAND"

    def __init__(self, message: str, *, char: str = "", index: int | None = None) -> None:
        super().__init__(message)
        self.char = char
        self.index = index


class OutOfBoundsError(RoverError):
    """A forward move would leave the plateau under the strict policy."""

    code = "OUT_OF_BOUNDS"

    def __init__(
        self,
        message: str,
        *,
        rover_index: int,
        instruction_index: int,
        position: str,
    ) -> None:
        super().__init__(message)
        self.rover_index = rover_index
        self.instruction_index = instruction_index
        self.position = position
