"""CLI interface for Cursor JIRA Kit.

Only the first positional token is interpreted as a command:

    cursor-jira-kit init | install    Scaffold the kit into the current directory
    cursor-jira-kit help | --help | -h  Show usage
    cursor-jira-kit --version | -v      Show the version

Anything else is reported as an unknown command and exits with status 1.
"""

from typing import Annotated

import typer

from cursor_jira_kit.config.settings import ScaffoldSettings
from cursor_jira_kit.scaffold.scaffolder import Scaffolder
from cursor_jira_kit.utils.console import console, print_error, print_info, show_version
from cursor_jira_kit.utils.errors import ExitCode, KitError, ScaffoldError, UserCancelledError
from cursor_jira_kit.utils.logging import log_message, setup_logging

INIT_COMMANDS = frozenset({"init", "install"})
HELP_COMMANDS = frozenset({"help", "--help", "-h"})
VERSION_COMMANDS = frozenset({"--version", "-v"})

HELP_TEXT = """
Cursor JIRA Kit - Drop-in JIRA integration for Cursor AI

Usage:
  cursor-jira-kit init     Install scripts and skills into current directory
  cursor-jira-kit help     Show this help message

Examples:
  cd your-project
  cursor-jira-kit init
"""

app = typer.Typer(
    name="cursor-jira-kit",
    help="Cursor JIRA Kit - Drop-in JIRA integration for Cursor AI",
    add_completion=False,
    no_args_is_help=False,
)


def show_help() -> None:
    """Display usage text."""
    console.print(HELP_TEXT, markup=False)


@app.command(
    add_help_option=False,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def main(
    command: Annotated[
        str | None,
        typer.Argument(
            help="Command to run: init, install, help or --version", show_default=False
        ),
    ] = None,
) -> None:
    """Cursor JIRA Kit - Drop-in JIRA integration for Cursor AI.

    No options are declared: with unknown options ignored, a leading flag
    such as ``--help`` arrives as ``command`` and everything after the
    first token is left unparsed.
    """
    setup_logging()
    log_message(f"Command: {command!r}")

    if command is None or command in HELP_COMMANDS:
        show_help()
        return

    if command in VERSION_COMMANDS:
        show_version()
        return

    if command in INIT_COMMANDS:
        _run_init(ScaffoldSettings.for_cwd())
        return

    print_error(f"Unknown command: {command}")
    show_help()
    raise typer.Exit(ExitCode.GENERAL_ERROR)


def _run_init(settings: ScaffoldSettings) -> None:
    """Run the interactive scaffold and map failures to exit codes."""
    try:
        Scaffolder(settings).run_init()

    except UserCancelledError as e:
        print_info(f"\n{e}")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e

    except KitError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code) from e

    except OSError as e:
        error = ScaffoldError.from_os_error(e)
        print_error(str(error))
        raise typer.Exit(error.exit_code) from e

    except KeyboardInterrupt as e:
        print_info("\nOperation cancelled by user")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e


__all__ = [
    "app",
    "main",
    "show_help",
    "VERSION_COMMANDS",
    "HELP_TEXT",
    "INIT_COMMANDS",
    "HELP_COMMANDS",
]
