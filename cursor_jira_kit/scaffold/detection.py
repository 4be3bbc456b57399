"""Detection of prompt defaults from existing project files.

The ``parse_*`` functions are pure: they take file contents and return a
value or None. The ``detect_*`` functions read the files from a project
directory and never raise for missing or malformed input.
"""

from __future__ import annotations

import json
import logging
import re
import tomllib
from pathlib import Path

logger = logging.getLogger(__name__)

GIT_CONFIG_PATH = Path(".git") / "config"
PACKAGE_JSON = "package.json"
PYPROJECT_TOML = "pyproject.toml"

PREFERRED_REMOTE = "origin"

_SECTION_RE = re.compile(r"^\s*\[([^\]]+)\]")
_REMOTE_SECTION_RE = re.compile(r'^remote\s+"([^"]+)"$')
_URL_RE = re.compile(r"^\s*url\s*=\s*(\S+)\s*$")
# Last two path segments, optional ".git" suffix and trailing slash
_OWNER_REPO_RE = re.compile(r"[:/]([^/:\s]+)/([^/\s]+?)(?:\.git)?/?$")
_JIRA_KEY_RE = re.compile(r"^([a-z]{2,5})", re.IGNORECASE)


def parse_repo_from_remote_url(url: str) -> str | None:
    """Extract ``owner/repo`` from a git remote URL.

    >>> parse_repo_from_remote_url("git@github.com:org/proj.git")
    'org/proj'
    """
    match = _OWNER_REPO_RE.search(url.strip())
    if not match:
        return None
    return f"{match.group(1)}/{match.group(2)}"


def parse_repo_from_git_config(text: str) -> str | None:
    """Extract ``owner/repo`` from the contents of a ``.git/config`` file.

    The URL of the ``origin`` remote wins; otherwise the first remote
    that carries a URL is used.

    Args:
        text: Contents of a git config file

    Returns:
        ``owner/repo`` or None if no remote URL matches
    """
    remotes: list[tuple[str, str]] = []
    current_remote: str | None = None

    for line in text.splitlines():
        section = _SECTION_RE.match(line)
        if section:
            remote = _REMOTE_SECTION_RE.match(section.group(1).strip())
            current_remote = remote.group(1) if remote else None
            continue

        if current_remote is None:
            continue

        url = _URL_RE.match(line)
        if url:
            remotes.append((current_remote, url.group(1)))

    remotes.sort(key=lambda remote: remote[0] != PREFERRED_REMOTE)
    for _, url in remotes:
        repo = parse_repo_from_remote_url(url)
        if repo:
            return repo
    return None


def parse_package_json_name(text: str) -> str | None:
    """Return the ``name`` field of a package.json document."""
    try:
        data = json.loads(text)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    name = data.get("name")
    return name if isinstance(name, str) and name else None


def parse_pyproject_name(text: str) -> str | None:
    """Return the project name declared in a pyproject.toml document.

    Checks ``[project].name`` first, then ``[tool.poetry].name``.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError:
        return None

    project = data.get("project")
    tool = data.get("tool")
    poetry = tool.get("poetry") if isinstance(tool, dict) else None

    for table in (project, poetry):
        if not isinstance(table, dict):
            continue
        name = table.get("name")
        if isinstance(name, str) and name:
            return name
    return None


def jira_key_from_name(name: str) -> str | None:
    """Derive a JIRA project key from a package name.

    Takes the leading run of 2-5 letters (an npm ``@scope/`` prefix is
    ignored) and upper-cases it.

    >>> jira_key_from_name("AB-service")
    'AB'
    """
    if name.startswith("@") and "/" in name:
        name = name.split("/", 1)[1]
    match = _JIRA_KEY_RE.match(name)
    return match.group(1).upper() if match else None


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Could not read %s: %s", path, e)
        return None


def read_manifest_name(target_dir: Path) -> str | None:
    """Read the declared project name from package.json or pyproject.toml.

    package.json takes precedence when both exist.
    """
    target_dir = Path(target_dir)

    text = _read_text(target_dir / PACKAGE_JSON)
    if text is not None:
        return parse_package_json_name(text)

    text = _read_text(target_dir / PYPROJECT_TOML)
    if text is not None:
        return parse_pyproject_name(text)

    return None


def detect_jira_key(target_dir: Path) -> str | None:
    """Detect a JIRA project key from the project manifest."""
    name = read_manifest_name(target_dir)
    if name is None:
        logger.debug("No manifest name found in %s", target_dir)
        return None
    return jira_key_from_name(name)


def detect_repo(target_dir: Path) -> str | None:
    """Detect ``owner/repo`` from the project's git remote configuration."""
    text = _read_text(Path(target_dir) / GIT_CONFIG_PATH)
    if text is None:
        return None
    return parse_repo_from_git_config(text)


__all__ = [
    "parse_repo_from_remote_url",
    "parse_repo_from_git_config",
    "parse_package_json_name",
    "parse_pyproject_name",
    "jira_key_from_name",
    "read_manifest_name",
    "detect_jira_key",
    "detect_repo",
]
