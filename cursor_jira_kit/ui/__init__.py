"""User interface modules for Cursor JIRA Kit."""

from cursor_jira_kit.ui.prompts import custom_style, prompt_confirm, prompt_input

__all__ = [
    "custom_style",
    "prompt_confirm",
    "prompt_input",
]
