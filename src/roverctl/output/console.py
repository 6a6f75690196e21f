"""Rich Console factory and theme for roverctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ROVER_THEME = Theme(
    {
        "rover.ok": "bold green",
        "rover.error": "bold red",
        "rover.warning": "bold yellow",
        "rover.op": "bold cyan",
        "rover.key": "dim",
        "rover.position": "bold",
        "rover.stopped": "yellow",
        "rover.heading.N": "cyan",
        "rover.heading.E": "green",
        "rover.heading.S": "magenta",
        "rover.heading.W": "blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ROVER_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_heading(heading: str) -> str:
    """Return the Rich style name for a heading letter."""
    if heading in ("N", "E", "S", "W"):
        return f"rover.heading.{heading}"
    return ""
