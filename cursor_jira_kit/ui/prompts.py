"""Interactive prompts for Cursor JIRA Kit.

This module provides Questionary-based user input prompts with
consistent styling and cancellation handling.
"""

import questionary
from questionary import Style

from cursor_jira_kit.utils.errors import UserCancelledError
from cursor_jira_kit.utils.logging import log_message

custom_style = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("instruction", "fg:white"),
        ("text", ""),
    ]
)


def prompt_input(message: str, default: str = "") -> str:
    """Prompt for a single line of text.

    The default is pre-filled in the input field; the user can accept it
    with Enter or edit it.

    Args:
        message: Prompt message
        default: Pre-filled value

    Returns:
        User input string (may be empty if the user cleared the field)

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt input: {message}")

    try:
        result = questionary.text(
            message,
            default=default,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled input prompt")

        log_message(f"User input: {result}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


def prompt_confirm(message: str, default: bool = False) -> bool:
    """Prompt for yes/no confirmation.

    Only ``y``/``Y`` answers yes; Enter returns ``default``.

    Args:
        message: Question to ask
        default: Value returned when the user just presses Enter

    Returns:
        True for yes, False for no

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt confirm: {message}")

    try:
        result = questionary.confirm(
            message,
            default=default,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled confirmation prompt")

        log_message(f"User response: {result}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


__all__ = [
    "custom_style",
    "prompt_input",
    "prompt_confirm",
]
