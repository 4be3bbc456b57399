"""Opt-in file logging for cursor-jira-kit.

A plain ``cursor-jira-kit init`` leaves nothing behind but the scaffolded
files. Set ``CURSOR_JIRA_KIT_LOG=true`` to record console output, prompt
answers and the per-file debug detail of the scaffold modules.

Environment Variables:
    CURSOR_JIRA_KIT_LOG: "true" turns logging on (default: off)
    CURSOR_JIRA_KIT_LOG_FILE: Log file path (default: ~/.cursor-jira-kit.log)
"""

import logging
import os
from pathlib import Path

LOGGER_NAME = "cursor_jira_kit"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

LOG_ENABLED = os.environ.get("CURSOR_JIRA_KIT_LOG", "false").lower() == "true"
LOG_FILE = Path(
    os.environ.get("CURSOR_JIRA_KIT_LOG_FILE", str(Path.home() / ".cursor-jira-kit.log"))
)

_logger: logging.Logger | None = None


def setup_logging() -> logging.Logger:
    """Attach the handler to the package logger.

    Modules log through ``logging.getLogger(__name__)``; their records
    propagate here, so one file handler covers the whole package. With
    logging off a NullHandler keeps library records from reaching stderr.
    """
    global _logger

    if _logger is not None:
        return _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    if LOG_ENABLED:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
    else:
        logger.addHandler(logging.NullHandler())

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    if _logger is None:
        return setup_logging()
    return _logger


def log_message(message: str) -> None:
    """Record a console message or prompt answer at INFO."""
    get_logger().info(message)


__all__ = [
    "LOG_ENABLED",
    "LOG_FILE",
    "LOG_FORMAT",
    "LOGGER_NAME",
    "setup_logging",
    "get_logger",
    "log_message",
]
