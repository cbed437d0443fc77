"""Retention enforcement: dangling-link GC, age eviction, count eviction."""

import os
import threading
from collections.abc import Callable
from datetime import datetime, timedelta
from pathlib import Path

from ...utils.logger import get_logger
from ...utils.now_utc import now_utc
from ..state.LinkRecord import LinkRecord
from ..state.StateStore import StateStore
from ..symlink._remove_link import _remove_link
from .PruneResult import PruneResult

logger = get_logger("prune")


class Pruner:
    """Keeps the tracked set bounded by ``max_files`` and ``max_age_hours``.

    Each pass commits its removals to the state store one at a time, so an
    interrupted cycle leaves a consistent, merely incomplete prune.
    """

    def __init__(
        self,
        output_dir: Path,
        state_store: StateStore,
        max_files: int,
        max_age_hours: float,
        clock: Callable[[], datetime] = now_utc,
        lock: "threading.Lock | None" = None,
    ) -> None:
        if max_files <= 0:
            raise ValueError(f"max_files must be positive, got {max_files}")
        if max_age_hours <= 0:
            raise ValueError(f"max_age_hours must be positive, got {max_age_hours}")
        self._output_dir = Path(output_dir)
        self._state_store = state_store
        self._max_files = max_files
        self._max_age = timedelta(hours=max_age_hours)
        self._clock = clock
        # Held for a whole cycle; shared with SymlinkManager when given
        self._prune_lock = lock or threading.Lock()

        self._timer_lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._interval_secs = 60.0
        self._periodic_running = False

    def prune(self) -> PruneResult:
        """Run a full prune cycle."""
        result = PruneResult()
        with self._prune_lock:
            result.dangling = self._remove_dangling()
            result.expired = self._prune_by_age()
            result.over_limit = self._prune_by_count()
        return result

    # Periodic pruning

    @property
    def periodic_running(self) -> bool:
        with self._timer_lock:
            return self._periodic_running

    def start_periodic(self, interval_secs: float = 60.0) -> None:
        """Prune every ``interval_secs`` seconds on a background timer until stopped."""
        if interval_secs <= 0:
            raise ValueError(f"interval_secs must be positive, got {interval_secs}")
        with self._timer_lock:
            if self._periodic_running:
                return
            self._interval_secs = interval_secs
            self._periodic_running = True
            self._schedule_next()

    def stop_periodic(self) -> None:
        """Cancel the periodic timer and wait for a cycle already in progress."""
        with self._timer_lock:
            self._periodic_running = False
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        with self._prune_lock:
            pass

    def _schedule_next(self) -> None:
        # Caller holds _timer_lock
        if not self._periodic_running:
            return
        timer = threading.Timer(self._interval_secs, self._periodic_tick)
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _periodic_tick(self) -> None:
        try:
            result = self.prune()
            if result.total:
                logger.info("Periodic prune removed %d link(s)", result.total)
        except Exception:  # keep the timer alive
            logger.exception("Periodic prune failed")
        finally:
            with self._timer_lock:
                self._schedule_next()

    # Passes

    def _drop(self, record: LinkRecord) -> bool:
        # Forget the record first; a record refreshed since it was read is kept
        if not self._state_store.remove_record(record):
            return False
        _remove_link(self._output_dir / record.symlink_name)
        return True

    def _remove_dangling(self) -> list[str]:
        removed: list[str] = []
        for name, record in self._state_store.all_entries().items():
            link_path = self._output_dir / name
            if not os.path.lexists(link_path):
                # Symlink deleted externally: forget it, touch nothing on disk
                if self._state_store.remove_record(record):
                    logger.debug("Cleaned orphaned state entry: %s", name)
                    removed.append(name)
            elif not os.path.exists(record.original_path):
                if self._drop(record):
                    logger.info("Removed broken symlink: %s", name)
                    removed.append(name)
        return removed

    def _prune_by_age(self) -> list[str]:
        cutoff = self._clock() - self._max_age
        removed: list[str] = []
        for name, record in self._state_store.all_entries().items():
            if record.timestamp < cutoff and self._drop(record):
                logger.info("Pruned expired symlink: %s", name)
                removed.append(name)
        return removed

    def _prune_by_count(self) -> list[str]:
        removed: list[str] = []
        while len(self._state_store) > self._max_files:
            ordered = self._state_store.sorted_by_age()  # oldest first
            if not ordered:
                break
            name, record = ordered[0]
            # Re-read on a miss: the oldest record was refreshed or removed meanwhile
            if self._drop(record):
                logger.info("Pruned over-limit symlink: %s", name)
                removed.append(name)
        return removed
