"""Location of the tracker PID lock file."""

from pathlib import Path

from ..config.RecentWorkConfig import RecentWorkConfig


def _lock_path() -> Path:
    """``<home>/tracker.lock``"""
    return RecentWorkConfig.get_home_dir() / "tracker.lock"
