"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from linecmd.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("linecmd").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("linecmd").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("linecmd.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "linecmd.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("linecmd.services.parse").debug("Parsed batch of %d line(s)", 3)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Parsed batch of 3 line(s)"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "linecmd.services.parse"

    def test_debug_hidden_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("linecmd.services.parse").debug("hidden")
        assert capfd.readouterr().err == ""

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("some.library").debug("noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_console_mode_writes_stderr_only(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=False)
        logging.getLogger("linecmd.commands").warning("to stderr")
        captured = capfd.readouterr()
        assert captured.out == ""
        assert "to stderr" in captured.err
