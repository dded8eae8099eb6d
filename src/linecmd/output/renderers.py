"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops
fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from linecmd.output.console import create_console, get_output, style_for_command

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from linecmd.services.result import ServiceResult

    Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    renderer = _OP_RENDERERS.get(result.op, _render_generic)
    renderer(result, console, verbose=verbose)
    if not result.ok:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: payloads only."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("payload", "")) for item in items if item.get("ok"))
    if "payload" in result.data:
        return str(result.data["payload"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="lc.ok")
    op = Text(f"  {result.op}", style="lc.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="lc.key")
    if key == "command":
        v = Text(str(value), style=style_for_command(str(value)))
    elif key == "payload":
        v = Text(repr(value), style="lc.payload")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="lc.error")
    op = Text(f"  {result.op}", style="lc.op")
    console.print(label, op, Text(" - "), Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v!r}"))


# ── Parse renderers ───────────────────────────────────────────────────


def _render_parse(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single-line parse. Failures are left to the error renderer."""
    if not result.ok:
        return
    _status_line(console, result)
    _field(console, "command", result.data["command"])
    _field(console, "payload", result.data["payload"])
    if verbose:
        _render_meta(console, result)


def _render_batch(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render one table row per parsed line, successes and failures alike."""
    items = result.data.get("items", [])
    if result.ok:
        _status_line(console, result)

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("LINE", justify="right")
    table.add_column("COMMAND")
    table.add_column("PAYLOAD / ERROR", overflow="fold")
    for item in items:
        if item.get("ok"):
            command = str(item["command"])
            table.add_row(
                str(item["line"]),
                Text(command, style=style_for_command(command)),
                Text(repr(item["payload"]), style="lc.payload"),
            )
        else:
            table.add_row(
                str(item["line"]),
                Text("-", style="dim"),
                Text(str(item["message"]), style="lc.error"),
            )
    console.print(table)
    console.print(
        Text(f"  {result.data.get('count', 0)} line(s), ", style="dim"),
        Text(f"{result.data.get('error_count', 0)} error(s)", style="dim"),
        sep="",
    )
    if verbose:
        _render_meta(console, result)


def _render_commands(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for entry in result.data.get("commands", []):
        name = str(entry["command"])
        console.print(
            Text(f"  {name:<10}", style=style_for_command(name)),
            Text(str(entry["syntax"]).replace("\n", "\\n")),
            sep="",
        )
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    if not result.ok:
        return
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "parse": _render_parse,
    "parse_batch": _render_batch,
    "commands": _render_commands,
}
