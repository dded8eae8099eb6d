"""Line parser for RETRIEVE and PUBLISH commands.

Rules, evaluated in order:

1. Input shorter than 8 bytes (see :func:`byte_length`, measured before normalization)
   is ``TOO_SHORT_INPUT``.
2. ``"RETRIEVE\\n"`` exactly is a RETRIEVE package with an empty payload.
3. Anything else starting with ``"RETRIEVE "`` is ``RETRIEVE_SYNTAX_ERROR``.
4. ``"PUBLISH <payload>\\n"`` is a PUBLISH package; the line terminator is
   not part of the payload.
5. Everything else is ``NO_PATTERN_DETECTED``.

INVARIANT: parse() is pure. It never raises for any string input and
returns exactly one of Package or ParseError.
"""

from __future__ import annotations

import sys
from pathlib import Path

from linecmd.domain.types import Command, Package, ParseError

MIN_INPUT_BYTES = 8
LINE_TERMINATOR = "\n"
RETRIEVE_LINE = f"{Command.RETRIEVE}{LINE_TERMINATOR}"
RETRIEVE_PREFIX = f"{Command.RETRIEVE} "
PUBLISH_PREFIX = f"{Command.PUBLISH} "


def executable_prefix() -> str | None:
    """Best-effort path of the running program, or None if unknown.

    Some launchers echo the invoking executable's path in front of the
    line. Passing this value as ``strip_prefix`` removes it.
    """
    argv0 = sys.argv[0] if sys.argv else ""
    if not argv0 or argv0 == "-c":
        return None
    try:
        return str(Path(argv0).resolve())
    except (OSError, RuntimeError):
        return None


def normalize(line: str, strip_prefix: str | None = None) -> str:
    """Remove a leading ``"<strip_prefix> "`` from *line* if present."""
    if not strip_prefix:
        return line
    lead = f"{strip_prefix} "
    if line.startswith(lead):
        return line[len(lead) :]
    return line


def byte_length(line: str) -> int:
    """Length of *line* in bytes as it arrived on the wire.

    Raw bytes that were not valid UTF-8 reach Python as lone surrogates
    (``surrogateescape``) and count as one byte each.
    """
    try:
        return len(line.encode("utf-8", "surrogateescape"))
    except UnicodeEncodeError:
        return len(line.encode("utf-8", "surrogatepass"))


def parse(line: str, *, strip_prefix: str | None = None) -> Package | ParseError:
    """Classify *line* as a command package or a parse error."""
    if byte_length(line) < MIN_INPUT_BYTES:
        return ParseError.TOO_SHORT_INPUT

    msg = normalize(line, strip_prefix)

    if msg == RETRIEVE_LINE:
        return Package(command=Command.RETRIEVE)
    if msg.startswith(RETRIEVE_PREFIX):
        return ParseError.RETRIEVE_SYNTAX_ERROR
    if msg.startswith(PUBLISH_PREFIX):
        payload = _strip_terminator(msg[len(PUBLISH_PREFIX) :])
        # Unvalidated: payloads may hold escaped raw bytes (lone surrogates).
        return Package.model_construct(command=Command.PUBLISH, payload=payload)
    return ParseError.NO_PATTERN_DETECTED


def _strip_terminator(rest: str) -> str:
    # An empty remainder ("PUBLISH " with no newline) stays empty.
    if rest.endswith(LINE_TERMINATOR):
        return rest[: -len(LINE_TERMINATOR)]
    return rest
