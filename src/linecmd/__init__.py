"""Line-oriented RETRIEVE/PUBLISH command parser."""

from __future__ import annotations

from linecmd.domain.parser import parse
from linecmd.domain.types import Command, Package, ParseError

__version__ = "0.1.0"

__all__ = ["Command", "Package", "ParseError", "__version__", "parse"]
