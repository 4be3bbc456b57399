"""Recursive copy of bundled template trees.

Copies are not atomic: a failure partway leaves whatever was already
written in place, and the OSError propagates to the caller.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

SHELL_SCRIPT_SUFFIX = ".sh"
SCRIPT_MODE = 0o755


def copy_dir(src: Path, dest: Path) -> list[Path]:
    """Mirror the directory tree at ``src`` into ``dest``.

    Creates ``dest`` and any missing ancestors, recurses into
    subdirectories and copies every file byte-for-byte. Files whose name
    ends in ``.sh`` get mode 0755 at the destination whatever their
    source mode was.

    Args:
        src: Source directory
        dest: Destination directory

    Returns:
        Destination paths of every copied file, in traversal order

    Raises:
        OSError: On any filesystem failure
    """
    src = Path(src)
    dest = Path(dest)
    dest.mkdir(parents=True, exist_ok=True)

    copied: list[Path] = []
    for entry in sorted(src.iterdir()):
        target = dest / entry.name
        if entry.is_dir():
            copied.extend(copy_dir(entry, target))
            continue

        shutil.copy2(entry, target)
        if entry.name.endswith(SHELL_SCRIPT_SUFFIX):
            target.chmod(SCRIPT_MODE)
        logger.debug("Copied %s -> %s", entry, target)
        copied.append(target)

    return copied


def copy_file_if_absent(src: Path, dest: Path) -> bool:
    """Copy a single file unless the destination already exists.

    Args:
        src: Source file; nothing happens when it is missing
        dest: Destination file; never overwritten

    Returns:
        True if the file was copied
    """
    src = Path(src)
    dest = Path(dest)
    if not src.is_file() or dest.exists():
        return False

    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(src, dest)
    return True


__all__ = [
    "SHELL_SCRIPT_SUFFIX",
    "SCRIPT_MODE",
    "copy_dir",
    "copy_file_if_absent",
]
