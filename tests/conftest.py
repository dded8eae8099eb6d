"""Shared pytest fixtures for linecmd tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from linecmd.config.discovery import CONFIG_ENV_VAR


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and package logger state after each test.

    Every CLI invocation reconfigures logging; without this, handlers
    bound to CliRunner's captured streams leak into later tests.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("linecmd")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_config")``.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv("LINECMD_PARSER__STRIP_PREFIX", raising=False)
    monkeypatch.delenv("LINECMD_PARSER__STRIP_EXECUTABLE_PATH", raising=False)
