"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from roverctl.output.console import create_console, get_output, style_for_heading

if TYPE_CHECKING:
    from rich.console import Console

    from roverctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        if result.error is None:
            return f"ERROR: {result.op} — Unknown error"
        return "\n".join(f"ERROR: {result.op} — {msg}" for msg in result.error.messages)

    positions = result.data.get("positions")
    if positions:
        return "\n".join(str(p) for p in positions)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────

_ERROR_LABELS: dict[str, str] = {
    "PARSE_ERROR": "Parse Error",
    "INVALID_COMMAND": "Execution Error",
    "OUT_OF_BOUNDS": "Execution Error",
    "INPUT_ERROR": "Input Error",
    "CONFIG_ERROR": "Config Error",
}


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="rover.ok"), Text(f"  {result.op}", style="rover.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text(f"  {key}: ", style="rover.key"), Text(str(value)), sep="")


def _position_text(position: str) -> Text:
    """Style an ``"x y H"`` string with its heading color."""
    coords, _, heading = position.rpartition(" ")
    text = Text(f"{coords} ", style="rover.position")
    text.append(heading, style=style_for_heading(heading))
    return text


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    duration = span_data.get("duration_ms", 0.0)
    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = Text(" " * indent)
    line.append(f"{duration:>9.3f}ms", style=style)
    line.append(f"  {span_data.get('name', '?')}")
    annotations = span_data.get("annotations")
    if annotations:
        line.append(f"  ({', '.join(f'{k}={v}' for k, v in annotations.items())})")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _rover_table(rovers: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right")
    table.add_column("Start")
    table.add_column("Instructions", overflow="fold")
    table.add_column("Final", style="rover.position")
    table.add_column("Skipped", justify="right")
    table.add_column("Stopped")
    for row in rovers:
        table.add_row(
            str(row.get("index", "")),
            str(row.get("start", "")),
            str(row.get("instructions", "")),
            str(row.get("final", "")),
            str(row.get("skipped", 0)),
            Text("yes", style="rover.stopped") if row.get("stopped") else Text("no"),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """One ``<Label>: <message>`` line per error, collected errors included."""
    err = result.error
    if err is None:
        console.print(Text("Error: Unknown error", style="rover.error"))
        return

    label = _ERROR_LABELS.get(err.code, "Error")
    for msg in err.messages:
        line = Text(f"{label}: ", style="rover.error")
        line.append(str(msg))
        console.print(line)

    if verbose:
        extra = {k: v for k, v in err.detail.items() if k != "errors"}
        if extra:
            console.print(Text("  detail:", style="dim"))
            for k, v in extra.items():
                console.print(Text(f"    {k}: {v}"))
        _render_meta(console, result)


# ── Mission renderers ─────────────────────────────────────────────────


def _render_positions(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render run/drive results: one ``x y H`` line per rover."""
    for position in result.data.get("positions", []):
        console.print(_position_text(str(position)))

    if verbose:
        rovers = result.data.get("rovers") or []
        if rovers:
            console.print()
            console.print(_rover_table(rovers))
        plateau = result.data.get("plateau")
        _field(console, "plateau", _plateau_label(plateau))
        _field(console, "policy", result.data.get("policy", ""))
        _render_meta(console, result)


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "plateau", _plateau_label(result.data.get("plateau")))
    _field(console, "rovers", result.data.get("rover_count", 0))
    if verbose:
        for row in result.data.get("rovers", []):
            _field(console, f"rover #{row['index']}", f"{row['start']}  {row['instructions']}")
        _render_meta(console, result)


def _plateau_label(plateau: dict[str, int] | None) -> str:
    if not plateau:
        return "unbounded"
    return f"{plateau['max_x']} {plateau['max_y']}"


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "run_mission": _render_positions,
    "drive": _render_positions,
    "validate_mission": _render_validate,
}
