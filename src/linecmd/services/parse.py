"""ParseService: runs the line parser and reports ServiceResult.

The parser itself is pure and returns ``Package | ParseError``. This
service adapts those values to the CLI contract: one result per line
(``parse``) or one aggregated result per batch (``parse_batch``).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from linecmd.domain.parser import LINE_TERMINATOR, PUBLISH_PREFIX, RETRIEVE_LINE, parse
from linecmd.domain.types import Command, Package, ParseError
from linecmd.services.result import ServiceError, ServiceResult, parse_failure

if TYPE_CHECKING:
    from linecmd.config.models import ParserConfig

logger = logging.getLogger(__name__)

MISSING_TERMINATOR_WARNING = "PUBLISH line has no trailing newline; payload kept as-is"


class ParseService:
    """Parse raw lines with an optional leading prefix stripped.

    Usage::

        svc = ParseService(strip_prefix="/usr/bin/relay")
        result = svc.parse_line("PUBLISH hello\\n")
        assert result.data["payload"] == "hello"
    """

    def __init__(self, strip_prefix: str | None = None) -> None:
        self.strip_prefix = strip_prefix

    @classmethod
    def from_config(cls, config: ParserConfig) -> ParseService:
        """Build a service using the prefix resolved from *config*."""
        return cls(strip_prefix=config.resolve_prefix())

    def parse_line(self, line: str) -> ServiceResult:
        """Parse a single line."""
        outcome = parse(line, strip_prefix=self.strip_prefix)
        if isinstance(outcome, ParseError):
            logger.debug("Rejected line %r: %s", line, outcome.name)
            return parse_failure("parse", outcome, input=printable(line))

        logger.debug("Parsed %s (%d chars payload)", outcome.command, len(outcome.payload))
        return ServiceResult(
            ok=True,
            op="parse",
            data=_package_data(outcome),
            warnings=_warnings_for(line, outcome),
        )

    def parse_lines(self, lines: Iterable[str]) -> ServiceResult:
        """Parse every line independently and aggregate the outcomes.

        Items keep input order. The batch fails if any line failed, but
        every line is still parsed and reported.
        """
        items: list[dict[str, Any]] = []
        warnings: list[str] = []
        error_count = 0

        for number, line in enumerate(lines, start=1):
            outcome = parse(line, strip_prefix=self.strip_prefix)
            if isinstance(outcome, ParseError):
                error_count += 1
                items.append(
                    {
                        "line": number,
                        "ok": False,
                        "code": outcome.name,
                        "message": outcome.description,
                    }
                )
                continue
            items.append({"line": number, "ok": True, **_package_data(outcome)})
            warnings.extend(f"line {number}: {w}" for w in _warnings_for(line, outcome))

        logger.debug("Parsed batch of %d line(s), %d error(s)", len(items), error_count)
        data = {"items": items, "count": len(items), "error_count": error_count}

        if error_count:
            return ServiceResult(
                ok=False,
                op="parse_batch",
                data=data,
                warnings=warnings,
                error=ServiceError(
                    code="BATCH_FAILED",
                    message=f"{error_count} of {len(items)} line(s) failed to parse",
                    detail={"failed_lines": [i["line"] for i in items if not i["ok"]]},
                ),
            )
        return ServiceResult(ok=True, op="parse_batch", data=data, warnings=warnings)

    def list_commands(self) -> ServiceResult:
        """Describe the recognized command keywords and their line syntax."""
        commands = [
            {"command": Command.RETRIEVE.value, "syntax": RETRIEVE_LINE},
            {"command": Command.PUBLISH.value, "syntax": f"{PUBLISH_PREFIX}<payload>\n"},
        ]
        meta = {"strip_prefix": self.strip_prefix} if self.strip_prefix else None
        return ServiceResult(ok=True, op="commands", data={"commands": commands}, meta=meta)


def printable(text: str) -> str:
    """Escape lone surrogates (undecodable input bytes) as ``\\udcXX`` text."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def _package_data(package: Package) -> dict[str, Any]:
    return {"command": package.command.value, "payload": printable(package.payload)}


def _warnings_for(line: str, package: Package) -> list[str]:
    if package.command is Command.PUBLISH and not line.endswith(LINE_TERMINATOR):
        return [MISSING_TERMINATOR_WARNING]
    return []
