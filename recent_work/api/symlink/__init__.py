"""Symlink creation, naming and exclusion rules."""

from .SymlinkManager import SymlinkManager

__all__ = ["SymlinkManager"]
