"""Subcommand modules for linecmd.

Provides register_commands() which uses deferred imports to keep
``linecmd --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from linecmd.commands.keywords import commands
    from linecmd.commands.parse import parse

    cli.add_command(parse)
    cli.add_command(commands)
