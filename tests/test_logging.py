"""Tests for cursor_jira_kit.utils.logging module."""

import importlib
import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

import cursor_jira_kit.utils.logging as logging_module


@pytest.fixture(autouse=True)
def reset_logging_state():
    """Restore the module to its environment-free state after each test."""
    yield
    logging.getLogger("cursor_jira_kit").handlers.clear()
    with patch.dict(os.environ, {}, clear=True):
        importlib.reload(logging_module)
    logging_module._logger = None


class TestLogging:
    """Tests for logging functionality."""

    def test_log_disabled_by_default(self):
        """Logging is disabled when CURSOR_JIRA_KIT_LOG is not set."""
        with patch.dict(os.environ, {}, clear=True):
            importlib.reload(logging_module)

            assert logging_module.LOG_ENABLED is False

    def test_log_enabled_with_env_var(self):
        """Logging is enabled when CURSOR_JIRA_KIT_LOG=true."""
        with patch.dict(os.environ, {"CURSOR_JIRA_KIT_LOG": "TRUE"}):
            importlib.reload(logging_module)

            assert logging_module.LOG_ENABLED is True

    def test_log_file_custom_path(self, tmp_path):
        """Custom log file path from environment."""
        custom_path = str(tmp_path / "kit.log")
        with patch.dict(os.environ, {"CURSOR_JIRA_KIT_LOG_FILE": custom_path}):
            importlib.reload(logging_module)

            assert str(logging_module.LOG_FILE) == custom_path

    def test_log_file_default_path(self):
        """Default log file is in the home directory."""
        with patch.dict(os.environ, {}, clear=True):
            importlib.reload(logging_module)

        assert logging_module.LOG_FILE == Path.home() / ".cursor-jira-kit.log"

    def test_setup_logging_is_cached(self):
        """setup_logging returns the same logger on repeated calls."""
        logging_module._logger = None

        first = logging_module.setup_logging()

        assert logging_module.setup_logging() is first
        assert logging_module.get_logger() is first

    def test_disabled_logging_uses_null_handler(self, monkeypatch):
        """With logging off, only a NullHandler is attached."""
        monkeypatch.setattr(logging_module, "LOG_ENABLED", False)
        logging_module._logger = None

        logger = logging_module.setup_logging()

        assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_log_message_written_to_file(self, tmp_path, monkeypatch):
        """log_message appends to the log file when enabled."""
        log_file = tmp_path / "logs" / "kit.log"
        monkeypatch.setattr(logging_module, "LOG_ENABLED", True)
        monkeypatch.setattr(logging_module, "LOG_FILE", log_file)
        logging_module._logger = None

        logging_module.log_message("Copied scripts/")
        for handler in logging_module.get_logger().handlers:
            handler.flush()

        assert "Copied scripts/" in log_file.read_text()

    def test_module_debug_records_reach_file(self, tmp_path, monkeypatch):
        """Debug records from package modules land in the same file."""
        log_file = tmp_path / "kit.log"
        monkeypatch.setattr(logging_module, "LOG_ENABLED", True)
        monkeypatch.setattr(logging_module, "LOG_FILE", log_file)
        logging_module._logger = None

        logging_module.setup_logging()
        logging.getLogger("cursor_jira_kit.scaffold.copy").debug("Copied a.sh")
        for handler in logging_module.get_logger().handlers:
            handler.flush()

        text = log_file.read_text()
        assert "DEBUG cursor_jira_kit.scaffold.copy: Copied a.sh" in text
