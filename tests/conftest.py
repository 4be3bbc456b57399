"""Shared pytest fixtures for Cursor JIRA Kit tests."""

from pathlib import Path

import pytest

from cursor_jira_kit.config.settings import ScaffoldSettings


class ScriptedPrompts:
    """Stand-in for the interactive prompts.

    Answers are consumed in order; every question is recorded together
    with the default it was offered.
    """

    def __init__(self, answers=(), confirm=False):
        self._answers = list(answers)
        self._confirm = confirm
        self.asked: list[tuple[str, str]] = []
        self.confirmations: list[str] = []

    def ask(self, message: str, default: str) -> str:
        self.asked.append((message, default))
        return self._answers.pop(0) if self._answers else ""

    def confirm(self, message: str) -> bool:
        self.confirmations.append(message)
        return self._confirm


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    """Create a bundled-assets directory shaped like the real one."""
    assets = tmp_path / "assets"
    scripts = assets / "scripts"
    scripts.mkdir(parents=True)
    (scripts / "jira-get-ticket.sh").write_text("#!/usr/bin/env bash\necho ticket\n")
    (scripts / "README.md").write_text("# Scripts\n")
    (scripts / "lib").mkdir()
    (scripts / "lib" / "common.sh").write_text("# shared\n")

    skills = assets / "cursor" / "skills" / "jira-ticket"
    skills.mkdir(parents=True)
    (skills / "SKILL.md").write_text("# Skill\n")

    (assets / "cursorrules.example").write_text("# rules\n")
    return assets


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Create an empty project directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def settings(target_dir: Path, assets_dir: Path) -> ScaffoldSettings:
    """Scaffold settings pointing at the temporary project and assets."""
    return ScaffoldSettings(target_dir=target_dir, assets_dir=assets_dir)


@pytest.fixture
def scripted_prompts():
    """Factory for ScriptedPrompts instances."""
    return ScriptedPrompts


def git_config_text(url: str, remote: str = "origin") -> str:
    """Contents of a minimal .git/config with one remote."""
    return (
        "[core]\n"
        "\trepositoryformatversion = 0\n"
        "\tbare = false\n"
        f'[remote "{remote}"]\n'
        f"\turl = {url}\n"
        f"\tfetch = +refs/heads/*:refs/remotes/{remote}/*\n"
        '[branch "main"]\n'
        f"\tremote = {remote}\n"
        "\tmerge = refs/heads/main\n"
    )


@pytest.fixture
def git_remote():
    """Write a .git/config with one remote into a project directory."""

    def _write(project: Path, url: str, remote: str = "origin") -> None:
        git_dir = project / ".git"
        git_dir.mkdir(exist_ok=True)
        (git_dir / "config").write_text(git_config_text(url, remote))

    return _write
