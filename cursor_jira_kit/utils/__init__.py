"""Utility modules for Cursor JIRA Kit.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
"""

from cursor_jira_kit.utils.console import (
    console,
    console_err,
    print_error,
    print_header,
    print_info,
    print_step,
    print_success,
    print_warning,
    show_version,
)
from cursor_jira_kit.utils.errors import (
    ExitCode,
    KitError,
    ScaffoldError,
    UserCancelledError,
)
from cursor_jira_kit.utils.logging import get_logger, log_message, setup_logging

__all__ = [
    # Console
    "console",
    "console_err",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    "show_version",
    # Errors
    "ExitCode",
    "KitError",
    "ScaffoldError",
    "UserCancelledError",
    # Logging
    "setup_logging",
    "get_logger",
    "log_message",
]
