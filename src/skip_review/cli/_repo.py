"""Locate the enclosing git repository."""

from __future__ import annotations

from pathlib import Path

GIT_MARKER = ".git"


def find_git_root(start_dir: Path) -> Path | None:
    """
    Return the nearest directory at or above *start_dir* containing `.git`.

    Symlinks are not resolved. Returns None when the filesystem root is
    reached without a match.
    """
    current = Path(start_dir).absolute()
    while True:
        if (current / GIT_MARKER).exists():
            return current
        if current.parent == current:
            return None
        current = current.parent
