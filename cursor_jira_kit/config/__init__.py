"""Configuration for Cursor JIRA Kit."""

from cursor_jira_kit.config.settings import (
    ASSET_DIRECTORIES,
    ASSETS_DIR,
    CONFIG_FILENAME,
    DEFAULT_BASE_BRANCH,
    DEFAULT_JIRA_KEY,
    DEFAULT_REPO,
    RULES_EXAMPLE,
    ScaffoldSettings,
)

__all__ = [
    "ASSET_DIRECTORIES",
    "ASSETS_DIR",
    "CONFIG_FILENAME",
    "DEFAULT_BASE_BRANCH",
    "DEFAULT_JIRA_KEY",
    "DEFAULT_REPO",
    "RULES_EXAMPLE",
    "ScaffoldSettings",
]
