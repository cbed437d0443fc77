"""Tracker: wires the observer, debouncer, symlink manager and pruner together."""

import signal
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

from watchdog.observers import Observer

from ...utils.logger import get_logger
from ...utils.now_utc import now_utc
from ..config.RecentWorkConfig import RecentWorkConfig
from ..prune.Pruner import Pruner
from ..state.LinkRecord import LinkRecord
from ..state.StateStore import StateStore
from ..symlink.SymlinkManager import SymlinkManager
from ..watch._EventHandler import _EventHandler
from ..watch.Debouncer import Debouncer
from ._is_ignored_path import _is_ignored_path
from ._record_rows import _record_counts, _record_rows

logger = get_logger("tracker")

_OBSERVER_JOIN_TIMEOUT_SECS = 5.0


class Tracker:
    """Owns one run of the service: startup, event routing, pruning, shutdown.

    ``run()`` blocks until ``stop()`` is called (from any thread, or from the
    SIGTERM/SIGINT handlers it installs when running on the main thread).
    A tracker is single-use.
    """

    def __init__(
        self,
        config: RecentWorkConfig,
        observer_factory: Callable[[], Any] = Observer,
    ) -> None:
        self._config = config
        self._output_dir = config.output_path
        self._ignored_dirs = config.ignored_paths
        self._observer_factory = observer_factory

        self._state_store = StateStore(config.state_file)
        # One lock so tracking and pruning never interleave
        link_lock = threading.Lock()
        self._symlink_manager = SymlinkManager(self._output_dir, self._state_store, lock=link_lock)
        self._pruner = Pruner(
            self._output_dir,
            self._state_store,
            max_files=config.retention.max_files,
            max_age_hours=config.retention.max_age_hours,
            lock=link_lock,
        )
        self._debouncer = Debouncer(config.debounce_secs, self._handle_event)

        self._watch_roots: list[Path] = []
        self._observer: Any = None
        self._stop_event = threading.Event()
        self._lifecycle_lock = threading.Lock()
        self._started = False
        self._shut_down = False
        self._running = False
        self._previous_handlers: dict[int, Any] = {}
        self._received_signal: int | None = None

    @property
    def config(self) -> RecentWorkConfig:
        return self._config

    @property
    def state_store(self) -> StateStore:
        return self._state_store

    @property
    def symlink_manager(self) -> SymlinkManager:
        return self._symlink_manager

    @property
    def pruner(self) -> Pruner:
        return self._pruner

    @property
    def debouncer(self) -> Debouncer:
        return self._debouncer

    @property
    def running(self) -> bool:
        return self._running

    # Lifecycle

    def run(self) -> None:
        """Set up, start watching and block until stopped.

        Raises:
            RuntimeError: If the output directory cannot be created, no watch
                directory exists, or the filesystem observer cannot start.
        """
        self._prepare_directories()
        self._state_store.load()
        with self._lifecycle_lock:
            self._started = True
        initial = self._pruner.prune()
        logger.info("Loaded %d tracked file(s), initial prune removed %d", len(self._state_store), initial.total)

        watch_dirs = self._valid_watch_dirs()
        if not watch_dirs:
            logger.error("No valid watch directories found")
            raise RuntimeError("No valid watch directories found")
        self._watch_roots = watch_dirs

        self._install_signal_handlers()
        try:
            with self._lifecycle_lock:
                if self._stop_event.is_set():
                    return
                self._start_observer(watch_dirs)
                self._pruner.start_periodic(self._config.prune_interval_secs)
                self._running = True
            logger.info(
                "Tracker started: watching %d directories, output: %s",
                len(watch_dirs),
                self._output_dir,
            )
            self._stop_event.wait()
            if self._received_signal is not None:
                logger.info("Received %s, shutting down", signal.Signals(self._received_signal).name)
        finally:
            self._shutdown()
            self._restore_signal_handlers()

    def stop(self) -> None:
        """Stop watching and pruning, flush state. Idempotent and thread-safe."""
        self._stop_event.set()
        self._shutdown()

    def _shutdown(self) -> None:
        with self._lifecycle_lock:
            if self._shut_down or not self._started:
                return
            self._shut_down = True
            self._stop_event.set()
            observer = self._observer
            self._observer = None

        if observer is not None:
            try:
                observer.stop()
                observer.join(timeout=_OBSERVER_JOIN_TIMEOUT_SECS)
            except Exception as exc:
                logger.warning("Error stopping filesystem observer: %s", exc)
        self._pruner.stop_periodic()
        dropped = self._debouncer.cancel_all()
        if dropped:
            logger.debug("Discarded %d pending event(s) at shutdown", dropped)
        # Waits for any in-flight write, then leaves the latest snapshot on disk
        self._state_store.flush()
        self._running = False
        logger.info("Tracker stopped")

    def _prepare_directories(self) -> None:
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            self._config.state_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Failed to create output directories: %s", exc)
            raise RuntimeError(f"Failed to create output directory {self._output_dir}: {exc}") from exc

    def _valid_watch_dirs(self) -> list[Path]:
        valid: list[Path] = []
        for path, exists in self._config.detect_watch_dirs():
            if not exists:
                logger.warning("Watch directory does not exist: %s", path)
                continue
            valid.append(path)
        return valid

    def _start_observer(self, watch_dirs: list[Path]) -> None:
        # Caller holds _lifecycle_lock
        handler = _EventHandler(self._debouncer, ignore_roots=[self._output_dir])
        try:
            observer = self._observer_factory()
            for path in watch_dirs:
                observer.schedule(handler, str(path), recursive=True)
                logger.info("Watching %s", path)
            observer.start()
        except Exception as exc:
            logger.error("Failed to start filesystem observer: %s", exc)
            raise RuntimeError(f"Failed to start filesystem observer: {exc}") from exc
        self._observer = observer

    def _install_signal_handlers(self) -> None:
        if threading.current_thread() is not threading.main_thread():
            return

        def handle_signal(signum, _frame):
            # Logging and cleanup happen in run(), outside the handler
            self._received_signal = signum
            self._stop_event.set()

        for signum in (signal.SIGTERM, signal.SIGINT):
            self._previous_handlers[signum] = signal.signal(signum, handle_signal)

    def _restore_signal_handlers(self) -> None:
        for signum, previous in self._previous_handlers.items():
            signal.signal(signum, previous if previous is not None else signal.SIG_DFL)
        self._previous_handlers.clear()

    # Event handling

    def _handle_event(self, path: str) -> None:
        """Route one debounced event: filter, link, prune."""
        if self._stop_event.is_set():
            return
        source = Path(path)
        if _is_ignored_path(
            source,
            output_dir=self._output_dir,
            ignored_dirs=self._ignored_dirs,
            watch_roots=self._watch_roots,
        ):
            return
        # Prune only when the tracked set changed; skipped and failed events leave it as is
        if self._symlink_manager.track(source) is None:
            return
        self._pruner.prune()

    # Introspection

    def records(self) -> list[dict]:
        """Current link records, newest first, with a broken flag."""
        return _record_rows(self._state_store, now_utc())

    def entries(self) -> dict[str, LinkRecord]:
        return self._state_store.all_entries()

    def status(self) -> dict[str, Any]:
        counts = _record_counts(self._state_store)
        return {
            "running": self._running,
            "tracked": counts["tracked"],
            "broken": counts["broken"],
            "max_files": self._config.retention.max_files,
            "max_age_hours": self._config.retention.max_age_hours,
            "pending_events": self._debouncer.pending_count,
            "watch_dirs": [str(p) for p in self._watch_roots],
            "output_dir": str(self._output_dir),
        }
