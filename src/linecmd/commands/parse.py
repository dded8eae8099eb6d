"""Command: parse RETRIEVE/PUBLISH lines from arguments or stdin."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linecmd.commands._base import LinecmdCommand

if TYPE_CHECKING:
    from linecmd.commands._context import AppContext


@click.command(
    cls=LinecmdCommand,
    examples="""\
  linecmd parse "PUBLISH hello world"
  linecmd parse RETRIEVE
  linecmd --json parse "PUBLISH a" "PUBLISH b"
  printf 'PUBLISH hi\\nRETRIEVE\\n' | linecmd parse
  linecmd parse --raw "PUBLISH no newline"
  linecmd parse --strip-prefix /usr/bin/relay '/usr/bin/relay RETRIEVE'""",
)
@click.argument("lines", nargs=-1)
@click.option("--raw", is_flag=True, help="Do not append a newline to argument lines.")
@click.option(
    "--strip-prefix",
    default=None,
    help="Remove this text (plus one space) from the start of each line.",
)
@click.pass_obj
def parse(app: AppContext, lines: tuple[str, ...], raw: bool, strip_prefix: str | None) -> None:
    """Parse LINES (or stdin, one command per line).

    Exits 1 if any line fails to parse.
    """
    if lines:
        inputs = list(lines) if raw else [f"{line}\n" for line in lines]
    else:
        with click.open_file("-", errors="surrogateescape") as stdin:
            inputs = stdin.readlines()
        if not inputs:
            raise click.UsageError("No input lines given on the command line or stdin.")

    svc = app.parse_service(strip_prefix)
    if len(inputs) == 1:
        app.emit(svc.parse_line(inputs[0]))
    else:
        app.emit(svc.parse_lines(inputs))
