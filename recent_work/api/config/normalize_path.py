"""Normalize a path for recent-work.

Expands user home directory (~) and returns an absolute path
WITHOUT resolving symlinks, so configured directories compare
equal to the paths the filesystem observer reports.
"""

from pathlib import Path


def normalize_path(path: str | Path) -> Path:
    """Expand user and return absolute path (no symlink resolution)."""
    return Path(path).expanduser().absolute()
