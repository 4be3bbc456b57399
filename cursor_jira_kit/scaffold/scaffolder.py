"""Interactive scaffold of the kit into a project directory.

Flow of ``cursor-jira-kit init``:
1. Ask for the JIRA project key, repository and base branch, each
   pre-filled with a detected or literal default
2. Write the configuration file, asking before replacing an existing one
3. Copy the bundled scripts and Cursor configuration
4. Print the next steps
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from rich.markup import escape

from cursor_jira_kit.config.settings import ScaffoldSettings
from cursor_jira_kit.scaffold.copy import copy_dir, copy_file_if_absent
from cursor_jira_kit.scaffold.detection import detect_jira_key, detect_repo
from cursor_jira_kit.scaffold.kit_config import (
    KitConfig,
    load_kit_config,
    write_kit_config,
)
from cursor_jira_kit.ui.prompts import prompt_confirm, prompt_input
from cursor_jira_kit.utils.console import (
    console,
    print_header,
    print_info,
    print_step,
    print_success,
    print_warning,
)

logger = logging.getLogger(__name__)

AskFn = Callable[[str, str], str]
ConfirmFn = Callable[[str], bool]
Detector = Callable[[Path], str | None]


@dataclass(frozen=True)
class PromptSpec:
    """One question of the init sequence.

    Attributes:
        field: KitConfig attribute the answer is stored in
        label: Question shown to the user
        detect: Optional detector run against the target directory
        fallback: Name of the ScaffoldSettings attribute used when nothing
            is detected
    """

    field: str
    label: str
    detect: Detector | None
    fallback: str


# Order determines prompt order
CONFIG_PROMPTS: tuple[PromptSpec, ...] = (
    PromptSpec("jira_key", "JIRA project key", detect_jira_key, "default_jira_key"),
    PromptSpec("repo", "GitHub repository (owner/repo)", detect_repo, "default_repo"),
    PromptSpec("base_branch", "Base branch", None, "default_base_branch"),
)


def ask_with_default(ask: AskFn, label: str, default: str) -> str:
    """Ask one question, falling back to ``default`` on an empty answer."""
    answer = ask(f"{label}:", default)
    return answer.strip() or default


def _confirm_overwrite(message: str) -> bool:
    return prompt_confirm(message, default=False)


class Scaffolder:
    """Installs the kit into ``settings.target_dir``.

    Args:
        settings: Locations and literal defaults for this run
        ask: ``(message, default) -> answer`` used for the text prompts
        confirm: ``(message) -> bool`` used for the overwrite question
    """

    def __init__(
        self,
        settings: ScaffoldSettings,
        *,
        ask: AskFn = prompt_input,
        confirm: ConfirmFn = _confirm_overwrite,
    ) -> None:
        self._settings = settings
        self._ask = ask
        self._confirm = confirm

    @property
    def settings(self) -> ScaffoldSettings:
        return self._settings

    def default_for(self, spec: PromptSpec) -> str:
        """Resolve the pre-filled answer for one prompt."""
        if spec.detect is not None:
            detected = spec.detect(self._settings.target_dir)
            if detected:
                logger.debug("Detected %s=%s", spec.field, detected)
                return detected
        return getattr(self._settings, spec.fallback)

    def collect_config(self) -> KitConfig:
        """Run the prompt sequence.

        Raises:
            UserCancelledError: If the user aborts a prompt
        """
        answers = {
            spec.field: ask_with_default(self._ask, spec.label, self.default_for(spec))
            for spec in CONFIG_PROMPTS
        }
        return KitConfig(**answers)

    def write_config(self, config: KitConfig) -> bool:
        """Write the configuration file unless the user keeps the existing one.

        Returns:
            True if the file was written
        """
        path = self._settings.config_path
        name = self._settings.config_filename

        if path.exists():
            existing = load_kit_config(path)
            if existing is not None:
                print_info(
                    f"Existing {name}: jiraKey={existing.jira_key}, "
                    f"repo={existing.repo}, baseBranch={existing.base_branch}"
                )
            if not self._confirm(f"{name} already exists. Overwrite?"):
                print_warning(f"Keeping existing {name}")
                return False

        write_kit_config(path, config)
        print_step(f"Wrote {name}")
        return True

    def copy_assets(self) -> list[Path]:
        """Copy the bundled scripts, Cursor configuration and example rules.

        Bundled sources that are missing are skipped without notice.

        Returns:
            Destination paths of every copied file
        """
        copied: list[Path] = []

        for source, target in self._settings.asset_directories():
            if not source.is_dir():
                logger.debug("Bundled directory %s not found, skipping", source)
                continue
            print_step(f"Copying {target.name}/ ...")
            copied.extend(copy_dir(source, target))

        source, target = self._settings.rules_example()
        if copy_file_if_absent(source, target):
            print_step(f"Copying {target.name} ...")
            copied.append(target)

        return copied

    def run_init(self) -> KitConfig:
        """Run the full interactive scaffold.

        Returns:
            The collected configuration values

        Raises:
            UserCancelledError: If the user aborts a prompt
            OSError: If a copy or write fails; files already written stay
        """
        print_header("Cursor JIRA Kit setup")

        config = self.collect_config()
        console.print()
        self.write_config(config)
        copied = self.copy_assets()
        logger.debug("Copied %d files into %s", len(copied), self._settings.target_dir)

        console.print()
        print_success("Cursor JIRA Kit installed!")
        show_next_steps(config)
        return config


def show_next_steps(config: KitConfig) -> None:
    """Print what the user has to do after the scaffold."""
    console.print()
    console.print("Next steps:")
    console.print("  1. Set environment variables:")
    console.print('     export JIRA_HOST="https://yourcompany.atlassian.net"')
    console.print('     export JIRA_EMAIL="your@email.com"')
    console.print('     export JIRA_API_TOKEN="your-api-token"')
    console.print()
    console.print("  2. (Optional) Copy and customize .cursorrules:")
    console.print("     cp .cursorrules.example .cursorrules")
    console.print()
    console.print(f'  3. In Cursor, try: "Work on ticket {escape(config.jira_key)}-123"')
    console.print()


__all__ = [
    "CONFIG_PROMPTS",
    "PromptSpec",
    "Scaffolder",
    "ask_with_default",
    "show_next_steps",
]
