"""Cursor JIRA Kit - Drop-in JIRA integration for Cursor AI.

This package provides a small CLI that scaffolds JIRA helper scripts,
Cursor assistant configuration and a project configuration file into
the current working directory.
"""

__version__ = "1.1.0"
SCRIPT_NAME = "cursor-jira-kit"

__all__ = [
    "__version__",
    "SCRIPT_NAME",
]
