"""Create, refresh and remove symlinks in the output directory."""

import os
import threading
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from ...utils.logger import get_logger
from ...utils.now_utc import now_utc
from ..config.normalize_path import normalize_path
from ..state.LinkRecord import LinkRecord
from ..state.StateStore import StateStore
from ._remove_link import _remove_link
from ._resolve_symlink_name import _resolve_symlink_name
from ._should_skip import _should_skip

logger = get_logger("symlink")


class SymlinkManager:
    """Keeps the output directory and the state store in step for tracked files.

    ``lock`` serializes link changes; pass the pruner's lock to keep tracking
    and pruning from interleaving.
    """

    def __init__(
        self,
        output_dir: Path,
        state_store: StateStore,
        clock: Callable[[], datetime] = now_utc,
        lock: "threading.Lock | None" = None,
    ) -> None:
        self._output_dir = Path(output_dir)
        self._state_store = state_store
        self._clock = clock
        self._lock = lock or threading.Lock()

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def track(self, source: Path | str) -> str | None:
        """Link ``source`` into the output directory.

        Returns the symlink name, or None when the source is gone, excluded, or the
        link could not be created. A source that is already tracked only has its
        timestamp refreshed.
        """
        source_path = normalize_path(source)
        if _should_skip(source_path.name):
            return None
        if not source_path.exists():
            logger.debug("Source file no longer exists: %s", source_path)
            return None

        original_path = str(source_path)
        with self._lock:
            existing = self._state_store.find_by_original_path(original_path)
            if existing is not None:
                if not os.path.lexists(self._output_dir / existing):
                    # Link deleted externally: relink below
                    self._state_store.remove(existing)
                elif self._state_store.touch(existing, self._clock()):
                    logger.debug("Updated timestamp for existing symlink: %s", existing)
                    return existing

            return self._create(source_path, original_path)

    def _create(self, source_path: Path, original_path: str) -> str | None:
        # Caller holds _lock
        name = _resolve_symlink_name(source_path, self._output_dir, self._state_store)
        link_path = self._output_dir / name

        # Stale entry occupying the name (hash tier or dangling link)
        if link_path.is_symlink():
            _remove_link(link_path)
        elif os.path.lexists(link_path):
            logger.warning("Refusing to replace non-symlink %s", link_path)
            return None
        self._state_store.remove(name)

        try:
            link_path.symlink_to(source_path)
        except OSError as exc:
            logger.error("Failed to create symlink %s -> %s: %s", name, source_path, exc)
            return None

        self._state_store.set(LinkRecord(original_path=original_path, timestamp=self._clock(), symlink_name=name))
        logger.info("Created symlink: %s -> %s", name, source_path)
        return name

    def remove_symlink(self, name: str) -> None:
        """Remove one symlink and its record."""
        with self._lock:
            _remove_link(self._output_dir / name)
            self._state_store.remove(name)

    def remove_all(self) -> int:
        """Delete every symlink named in the state store and clear it.

        Returns the number of records cleared.
        """
        with self._lock:
            entries = self._state_store.all_entries()
            for name in entries:
                _remove_link(self._output_dir / name)
            self._state_store.clear()
        logger.info("Cleared all symlinks (%d)", len(entries))
        return len(entries)
