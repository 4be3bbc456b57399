"""Custom exceptions and exit codes for Cursor JIRA Kit.

This module defines the exit codes and exception hierarchy used throughout
the application.
"""

from enum import IntEnum
from pathlib import Path
from typing import ClassVar


class ExitCode(IntEnum):
    """Process exit codes.

    These codes are used for consistent error reporting and can be
    checked by calling scripts or CI systems.
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USER_CANCELLED = 2


class KitError(Exception):
    """Base exception for Cursor JIRA Kit errors.

    All custom exceptions in this application should inherit from this class.
    Each exception type has an associated exit code for proper error reporting.

    Attributes:
        exit_code: The exit code to use when this exception causes program termination
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message describing what went wrong
            exit_code: Optional override for the default exit code
        """
        super().__init__(message)
        self._exit_code = exit_code

    @property
    def exit_code(self) -> ExitCode:
        """Get the exit code for this exception."""
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class UserCancelledError(KitError):
    """User cancelled the operation.

    Raised when:
    - User presses Ctrl+C at a prompt
    - A Questionary prompt is aborted and returns None
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.USER_CANCELLED


class ScaffoldError(KitError):
    """A filesystem operation failed while scaffolding.

    The scaffold is not transactional: files written before the failure
    stay in place.

    Attributes:
        path: The path involved in the failed operation, if known
    """

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        exit_code: ExitCode | None = None,
    ) -> None:
        self.path = Path(path) if path is not None else None
        if self.path is not None and str(self.path) not in message:
            message = f"{message} ({self.path})"
        super().__init__(message, exit_code)

    @classmethod
    def from_os_error(cls, error: OSError) -> "ScaffoldError":
        """Wrap an OSError raised during a copy or write."""
        reason = error.strerror or str(error)
        return cls(f"Scaffold failed: {reason}", path=error.filename)


__all__ = [
    "ExitCode",
    "KitError",
    "UserCancelledError",
    "ScaffoldError",
]
