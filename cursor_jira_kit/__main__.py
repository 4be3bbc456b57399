"""Entry point for running cursor_jira_kit as a module.

This allows running the application with:
    python -m cursor_jira_kit [COMMAND]
"""

from cursor_jira_kit.cli import app

if __name__ == "__main__":
    app()
