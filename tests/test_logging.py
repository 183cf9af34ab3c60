"""
Tests for logging setup — level resolution and handler wiring.
"""

import logging

import pytest

from kubectl_installer.core.observability.logging_config import (
    _parse_level,
    resolve_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestResolveLevel:
    def test_flag_precedence(self):
        assert resolve_level(debug=True, verbose=True, quiet=True) == "DEBUG"
        assert resolve_level(verbose=True, quiet=True) == "INFO"
        assert resolve_level(quiet=True) == "ERROR"

    def test_env_fallback(self, monkeypatch):
        monkeypatch.setenv("KCI_LOG_LEVEL", "INFO")
        assert resolve_level() == "INFO"

    def test_default(self):
        assert resolve_level() == "WARNING"


class TestSetupLogging:
    def test_console_level(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "installer.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        logging.getLogger("kubectl_installer.test").debug("to file only")
        for h in root.handlers:
            h.flush()
        assert "to file only" in log_file.read_text()

    def test_unknown_level_falls_back(self):
        assert _parse_level("LOUD") == logging.WARNING
        assert _parse_level(None) == logging.WARNING
