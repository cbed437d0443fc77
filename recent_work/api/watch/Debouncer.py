"""Per-path debouncing of filesystem notifications."""

import os
import threading
from collections.abc import Callable

from ...utils.logger import get_logger
from .ChangeKind import TRACKED_KINDS, ChangeKind

logger = get_logger("watch")


class Debouncer:
    """Coalesces bursts of notifications for a path into one stable event.

    Every accepted notification cancels the path's pending timer and arms a new
    one for ``interval_secs``. When a timer fires uncanceled and the path still
    exists, ``handler(path)`` is called once, on the timer's thread. Notifications
    for other paths are never delayed by a pending timer.
    """

    def __init__(self, interval_secs: float, handler: Callable[[str], None]) -> None:
        if interval_secs <= 0:
            raise ValueError(f"interval_secs must be positive, got {interval_secs}")
        self._interval_secs = interval_secs
        self._handler = handler
        self._timers: dict[str, threading.Timer] = {}
        self._lock = threading.Lock()

    @property
    def interval_secs(self) -> float:
        return self._interval_secs

    @property
    def pending_count(self) -> int:
        with self._lock:
            return len(self._timers)

    def notify(self, path: str, kind: ChangeKind, is_directory: bool = False) -> bool:
        """Register a change to ``path``. Returns False for ineligible notifications.

        Only created, modified and renamed changes to non-directories are eligible.
        """
        if is_directory or ChangeKind(kind) not in TRACKED_KINDS:
            return False

        with self._lock:
            previous = self._timers.get(path)
            if previous is not None:
                previous.cancel()
            timer = threading.Timer(self._interval_secs, self._fire, args=(path,))
            timer.daemon = True
            self._timers[path] = timer
            timer.start()
        return True

    def _fire(self, path: str) -> None:
        with self._lock:
            timer = self._timers.get(path)
            # A timer that lost the race with its own cancel() is no longer current
            if timer is None or timer is not threading.current_thread():
                return
            del self._timers[path]

        if not os.path.exists(path):
            logger.debug("Dropped event for vanished path: %s", path)
            return

        try:
            self._handler(path)
        except Exception:  # one bad file must not kill the timer thread
            logger.exception("Handler failed for %s", path)

    def cancel_all(self) -> int:
        """Cancel every pending timer. Returns how many were pending."""
        with self._lock:
            timers = list(self._timers.values())
            self._timers.clear()
        for timer in timers:
            timer.cancel()
        return len(timers)
