"""Config file discovery.

Resolution order for linecmd.toml:
  1. Explicit ``--config`` path (ignored if it is not a file)
  2. ``LINECMD_CONFIG`` env var
  3. Walk-up from the start directory, the way git finds ``.git/``
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "linecmd.toml"
CONFIG_ENV_VAR = "LINECMD_CONFIG"


def _walk_up(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def find_config(start: Path | None = None, *, explicit: str | None = None) -> Path | None:
    """Locate the config file, or return None when there is none."""
    if explicit:
        p = Path(explicit)
        return p if p.is_file() else None

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    return _walk_up((start or Path.cwd()).resolve())
