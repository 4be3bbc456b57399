"""The generated project configuration file.

The file is rendered from a fixed template rather than dumped, so the
comment block explaining credential handling survives. Values are read
back with PyYAML when an existing file is shown before an overwrite.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

CONFIG_TEMPLATE = """\
# Cursor JIRA Kit configuration
#
# Credentials are never stored in this file. The bundled scripts read them
# from environment variables:
#   JIRA_HOST       e.g. https://yourcompany.atlassian.net
#   JIRA_EMAIL      the account email used for the API token
#   JIRA_API_TOKEN  an Atlassian API token

jiraKey: {jira_key}
repo: {repo}
baseBranch: {base_branch}

workflow:
  branchPattern: "feature/{{ticket}}-{{slug}}"
  startTransition: In Progress
  reviewTransition: In Review
  commitPrefix: "{{ticket}}: "
"""


@dataclass(frozen=True)
class KitConfig:
    """Values collected by the init prompts.

    Attributes:
        jira_key: JIRA project key, e.g. "PROJ"
        repo: Repository identifier in ``owner/repo`` form
        base_branch: Branch that feature branches are cut from
    """

    jira_key: str
    repo: str
    base_branch: str


def _yaml_scalar(value: str) -> str:
    """Render a string as a YAML scalar that loads back unchanged.

    Plain style is used whenever YAML would read the bare text as the same
    string; everything else (``yes``, ``123``, ``a: b``...) is double-quoted.
    """
    if value and value == value.strip() and "#" not in value:
        try:
            if yaml.safe_load(value) == value:
                return value
        except yaml.YAMLError:
            pass
    return json.dumps(value, ensure_ascii=False)


def render_kit_config(config: KitConfig) -> str:
    """Render the configuration file contents."""
    return CONFIG_TEMPLATE.format(
        jira_key=_yaml_scalar(config.jira_key),
        repo=_yaml_scalar(config.repo),
        base_branch=_yaml_scalar(config.base_branch),
    )


def write_kit_config(path: Path, config: KitConfig) -> None:
    """Write the rendered configuration to ``path``, replacing any file there.

    Raises:
        OSError: If the file cannot be written
    """
    Path(path).write_text(render_kit_config(config), encoding="utf-8")


def load_kit_config(path: Path) -> KitConfig | None:
    """Read an existing configuration file.

    Returns:
        The stored values, or None if the file is missing, unreadable,
        not a mapping or lacks one of the three keys
    """
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.debug("Could not load %s: %s", path, e)
        return None

    if not isinstance(data, dict):
        return None

    values = [data.get(key) for key in ("jiraKey", "repo", "baseBranch")]
    if any(value is None for value in values):
        return None

    jira_key, repo, base_branch = (str(value) for value in values)
    return KitConfig(jira_key=jira_key, repo=repo, base_branch=base_branch)


__all__ = [
    "CONFIG_TEMPLATE",
    "KitConfig",
    "render_kit_config",
    "write_kit_config",
    "load_kit_config",
]
