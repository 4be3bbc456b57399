"""Scaffolding of the kit into a project directory."""

from cursor_jira_kit.scaffold.copy import copy_dir, copy_file_if_absent
from cursor_jira_kit.scaffold.detection import detect_jira_key, detect_repo
from cursor_jira_kit.scaffold.kit_config import (
    KitConfig,
    load_kit_config,
    render_kit_config,
    write_kit_config,
)
from cursor_jira_kit.scaffold.scaffolder import (
    CONFIG_PROMPTS,
    PromptSpec,
    Scaffolder,
    ask_with_default,
)

__all__ = [
    "CONFIG_PROMPTS",
    "KitConfig",
    "PromptSpec",
    "Scaffolder",
    "ask_with_default",
    "copy_dir",
    "copy_file_if_absent",
    "detect_jira_key",
    "detect_repo",
    "load_kit_config",
    "render_kit_config",
    "write_kit_config",
]
