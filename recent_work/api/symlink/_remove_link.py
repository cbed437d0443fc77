"""Remove one entry from the output directory."""

from pathlib import Path

from ...utils.logger import get_logger

logger = get_logger("symlink")


def _remove_link(link_path: Path) -> bool:
    """Unlink the entry at ``link_path``.

    A missing entry counts as removed. Other OS errors are logged and
    reported as False so callers can carry on.
    """
    try:
        link_path.unlink()
    except FileNotFoundError:
        return True
    except OSError as exc:
        logger.warning("Failed to remove %s: %s", link_path, exc)
        return False
    return True
