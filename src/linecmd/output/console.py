"""Rich Console factory and theme for linecmd output.

Consoles render to a StringIO buffer so renderers can return strings.
In non-TTY environments (tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LINECMD_THEME = Theme(
    {
        "lc.ok": "bold green",
        "lc.error": "bold red",
        "lc.warning": "bold yellow",
        "lc.op": "bold cyan",
        "lc.key": "dim",
        "lc.command.retrieve": "blue",
        "lc.command.publish": "green",
        "lc.payload": "bold",
    }
)

_COMMAND_STYLES: dict[str, str] = {
    "RETRIEVE": "lc.command.retrieve",
    "PUBLISH": "lc.command.publish",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=LINECMD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_command(command: str) -> str:
    """Return the Rich style name for a command keyword."""
    return _COMMAND_STYLES.get(command, "")
