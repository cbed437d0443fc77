"""Persistent record of tracked symlinks."""

from .LinkRecord import LinkRecord
from .StateStore import StateStore

__all__ = ["LinkRecord", "StateStore"]
