"""Rich-based console output utilities.

This module provides the colored terminal output used by every command.
"""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from cursor_jira_kit import SCRIPT_NAME, __version__

custom_theme = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold blue",
        "header": "bold magenta",
        "step": "bold cyan",
        "highlight": "bold white",
    }
)

# Global console instances
console = Console(theme=custom_theme, highlight=False)
console_err = Console(theme=custom_theme, stderr=True, highlight=False)


def print_error(message: str) -> None:
    """Print error message in red to stderr."""
    from cursor_jira_kit.utils.logging import log_message

    console_err.print(f"[error]Error:[/error] [red]{escape(message)}[/red]")
    log_message(f"ERROR: {message}")


def print_success(message: str) -> None:
    """Print success message in green."""
    from cursor_jira_kit.utils.logging import log_message

    console.print(f"[success]✓[/success] [green]{escape(message)}[/green]")
    log_message(f"SUCCESS: {message}")


def print_warning(message: str) -> None:
    """Print warning message in yellow."""
    from cursor_jira_kit.utils.logging import log_message

    console.print(f"[warning]![/warning] [yellow]{escape(message)}[/yellow]")
    log_message(f"WARNING: {message}")


def print_info(message: str) -> None:
    """Print info message in cyan."""
    from cursor_jira_kit.utils.logging import log_message

    console.print(f"[cyan]{escape(message)}[/cyan]")
    log_message(f"INFO: {message}")


def print_header(title: str) -> None:
    """Print section header in magenta."""
    console.print()
    console.print(f"[header]{escape(title)}[/header]")
    console.print()


def print_step(message: str) -> None:
    """Print step indicator with arrow."""
    from cursor_jira_kit.utils.logging import log_message

    console.print(f"  [step]➜[/step] {escape(message)}")
    log_message(f"STEP: {message}")


def show_version() -> None:
    """Display version information."""
    console.print(f"[bold]{SCRIPT_NAME}[/bold] v{__version__}")


__all__ = [
    "console",
    "console_err",
    "custom_theme",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    "show_version",
]
