"""Command: list recognized command keywords."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linecmd.commands._base import LinecmdCommand

if TYPE_CHECKING:
    from linecmd.commands._context import AppContext


@click.command(
    cls=LinecmdCommand,
    examples="""\
  linecmd commands
  linecmd --json commands""",
)
@click.pass_obj
def commands(app: AppContext) -> None:
    """List the command keywords and their line syntax."""
    app.emit(app.parse_service().list_commands())
