"""Filesystem notification intake and debouncing."""

from .ChangeKind import ChangeKind
from .Debouncer import Debouncer

__all__ = ["ChangeKind", "Debouncer"]
