"""Filesystem event handler feeding the debouncer."""

from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler

from .ChangeKind import ChangeKind
from .Debouncer import Debouncer


def _as_str(path: str | bytes) -> str:
    return path.decode() if isinstance(path, bytes) else str(path)


class _EventHandler(FileSystemEventHandler):
    """Translates watchdog events into ``Debouncer.notify`` calls.

    Events under any of ``ignore_roots`` (the output directory) never reach the
    debouncer, so the tracker does not react to its own symlinks.
    """

    def __init__(self, debouncer: Debouncer, ignore_roots: list[Path] | None = None) -> None:
        super().__init__()
        self._debouncer = debouncer
        self._ignore_roots = [Path(p) for p in (ignore_roots or [])]

    def _ignored(self, path: str) -> bool:
        candidate = Path(path)
        return any(candidate == root or candidate.is_relative_to(root) for root in self._ignore_roots)

    def _notify(self, path: str | bytes, kind: ChangeKind, is_directory: bool) -> None:
        path_str = _as_str(path)
        if self._ignored(path_str):
            return
        self._debouncer.notify(path_str, kind, is_directory=is_directory)

    def on_created(self, event: FileSystemEvent) -> None:
        self._notify(event.src_path, ChangeKind.CREATED, event.is_directory)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._notify(event.src_path, ChangeKind.MODIFIED, event.is_directory)

    def on_moved(self, event: FileSystemEvent) -> None:
        # The file now lives at dest_path
        self._notify(event.dest_path, ChangeKind.RENAMED, event.is_directory)

    def on_deleted(self, event: FileSystemEvent) -> None:
        self._notify(event.src_path, ChangeKind.REMOVED, event.is_directory)
