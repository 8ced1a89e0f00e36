"""
Tests for logging setup.
"""

import logging
from pathlib import Path

from mockgen.core.observability.logging_config import _parse_level, setup_logging


class TestParseLevel:
    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("INFO") == logging.INFO

    def test_unknown_falls_back_to_warning(self):
        assert _parse_level("LOUD") == logging.WARNING

    def test_empty(self):
        assert _parse_level(None) == logging.WARNING
        assert _parse_level("") == logging.WARNING


class TestSetupLogging:
    def test_console_only(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.INFO

    def test_replaces_handlers(self):
        setup_logging("INFO")
        setup_logging("ERROR")
        assert len(logging.getLogger().handlers) == 1

    def test_leaves_raise_exceptions_alone(self):
        before = logging.raiseExceptions
        setup_logging("DEBUG")
        assert logging.raiseExceptions is before

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "mockgen.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("mockgen.test").debug("written to file only")
        for handler in root.handlers:
            handler.flush()
        assert "written to file only" in log_file.read_text(encoding="utf-8")
