"""Custom Click base classes and shared mission options.

RoverCommand accepts an ``examples`` parameter; when ``--examples`` is
passed the command prints usage examples and exits.  ``boundary_options``
adds the boundary-policy flags; ``mission_options`` adds those plus the
error-mode flags for multi-rover commands.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

_F = TypeVar("_F", bound=Callable[..., Any])


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class RoverCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def _apply(func: _F, decorators: list[Callable[[_F], _F]]) -> _F:
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def boundary_options(func: _F) -> _F:
    """Add ``--strict/--ignore-oob/--stop-on-oob/--wrap``.

    Flags sharing a destination resolve to the last one given; when none is
    given the value is None and the configured setting applies.
    """
    return _apply(
        func,
        [
            click.option(
                "--strict",
                "boundary_policy",
                flag_value="strict",
                help="Fail on out-of-bounds moves (default).",
            ),
            click.option(
                "--ignore-oob",
                "boundary_policy",
                flag_value="ignore",
                help="Skip out-of-bounds moves.",
            ),
            click.option(
                "--stop-on-oob",
                "boundary_policy",
                flag_value="stop",
                help="Stop the rover at its first out-of-bounds move.",
            ),
            click.option(
                "--wrap",
                "boundary_policy",
                flag_value="wrap",
                help="Wrap around to the opposite edge.",
            ),
        ],
    )


def mission_options(func: _F) -> _F:
    """Boundary-policy flags plus ``--fail-fast/--collect-errors``."""
    func = _apply(
        func,
        [
            click.option(
                "--fail-fast",
                "error_mode",
                flag_value="fail-fast",
                help="Stop on first error (default).",
            ),
            click.option(
                "--collect-errors",
                "error_mode",
                flag_value="collect",
                help="Continue processing after errors and report them all.",
            ),
        ],
    )
    return boundary_options(func)
