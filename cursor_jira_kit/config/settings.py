"""Settings dataclass for the scaffolder.

This module holds every location and literal default the scaffolder uses,
so nothing downstream reaches for the process working directory or the
package install location on its own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

# Bundled template content shipped as package data
ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets"

CONFIG_FILENAME = ".cursor-jira-kit.yml"

# (bundled name, target name). Bundled names carry no leading dot so that
# setuptools package-data globs include them.
ASSET_DIRECTORIES: tuple[tuple[str, str], ...] = (
    ("scripts", "scripts"),
    ("cursor", ".cursor"),
)
RULES_EXAMPLE: tuple[str, str] = ("cursorrules.example", ".cursorrules.example")

DEFAULT_JIRA_KEY = "PROJ"
DEFAULT_REPO = "owner/repo"
DEFAULT_BASE_BRANCH = "develop"


@dataclass
class ScaffoldSettings:
    """Configuration for one scaffold run.

    Attributes:
        target_dir: Project directory the kit is installed into
        assets_dir: Directory holding the bundled template content
        config_filename: Name of the generated configuration file
        default_jira_key: Fallback when no project key can be detected
        default_repo: Fallback when no git remote can be detected
        default_base_branch: Default base branch
    """

    target_dir: Path
    assets_dir: Path = field(default_factory=lambda: ASSETS_DIR)
    config_filename: str = CONFIG_FILENAME
    default_jira_key: str = DEFAULT_JIRA_KEY
    default_repo: str = DEFAULT_REPO
    default_base_branch: str = DEFAULT_BASE_BRANCH

    def __post_init__(self) -> None:
        self.target_dir = Path(self.target_dir)
        self.assets_dir = Path(self.assets_dir)

    @classmethod
    def for_cwd(cls) -> ScaffoldSettings:
        """Settings targeting the current working directory."""
        return cls(target_dir=Path.cwd())

    @property
    def config_path(self) -> Path:
        """Path of the generated configuration file."""
        return self.target_dir / self.config_filename

    def asset_directories(self) -> list[tuple[Path, Path]]:
        """Bundled directories paired with their destinations."""
        return [
            (self.assets_dir / source, self.target_dir / target)
            for source, target in ASSET_DIRECTORIES
        ]

    def rules_example(self) -> tuple[Path, Path]:
        """The bundled example rules file paired with its destination."""
        source, target = RULES_EXAMPLE
        return self.assets_dir / source, self.target_dir / target
