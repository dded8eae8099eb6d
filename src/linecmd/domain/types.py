"""Command, parse-error, and package types.

ParseError is a plain tagged value, not an exception: the parser returns
it alongside Package and callers branch on ``isinstance``.
"""

from __future__ import annotations

from enum import Enum, StrEnum

from pydantic import BaseModel


class Command(StrEnum):
    """Recognized command keywords."""

    RETRIEVE = "RETRIEVE"
    PUBLISH = "PUBLISH"


class ParseError(Enum):
    """Failure kinds reported by the parser."""

    TOO_SHORT_INPUT = "too_short_input"
    RETRIEVE_SYNTAX_ERROR = "retrieve_syntax_error"
    NO_PATTERN_DETECTED = "no_pattern_detected"

    @property
    def description(self) -> str:
        """Fixed human-readable message for this failure kind."""
        return _DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.description


_DESCRIPTIONS: dict[ParseError, str] = {
    ParseError.TOO_SHORT_INPUT: "Input message is too short.",
    ParseError.RETRIEVE_SYNTAX_ERROR: "Wrong RETRIEVE syntax.",
    ParseError.NO_PATTERN_DETECTED: "No pattern detected.",
}


class Package(BaseModel):
    """A successfully parsed command and its payload."""

    model_config = {"frozen": True}

    command: Command
    payload: str = ""
