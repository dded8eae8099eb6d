"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, linecmd.toml only contains
overrides. A missing file means every default applies.
"""

from __future__ import annotations

from pydantic import BaseModel

from linecmd.domain.parser import executable_prefix


class ParserConfig(BaseModel):
    """[parser] section.

    Attributes:
        strip_prefix: Text removed (with one following space) from the
            start of each line before matching.
        strip_executable_path: Use the running program's path as the
            prefix when ``strip_prefix`` is unset.
    """

    model_config = {"frozen": True}

    strip_prefix: str | None = None
    strip_executable_path: bool = False

    def resolve_prefix(self) -> str | None:
        """Return the prefix to strip, or None to leave lines untouched."""
        if self.strip_prefix:
            return self.strip_prefix
        if self.strip_executable_path:
            return executable_prefix()
        return None
