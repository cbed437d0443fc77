"""Concurrency-safe mapping of symlink name to LinkRecord, mirrored to disk."""

import json
import os
import tempfile
import threading
from contextlib import suppress
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from ...utils.logger import get_logger
from .LinkRecord import LinkRecord

logger = get_logger("state")


class StateStore:
    """In-memory owner of record for tracked links.

    Every mutation is followed by a full-snapshot write of ``state_file``
    (temp file in the same directory, then ``os.replace``). The durable copy
    is a cold-start cache: any failure to read it yields an empty mapping.
    """

    def __init__(self, state_file: Path) -> None:
        self._state_file = Path(state_file)
        self._entries: dict[str, LinkRecord] = {}
        self._lock = threading.Lock()
        # Orders durable writes; held for the whole write so flush() can wait on it
        self._write_lock = threading.Lock()

    @property
    def state_file(self) -> Path:
        return self._state_file

    # Persistence

    def load(self) -> None:
        """Replace the in-memory mapping with the durable copy (empty on any failure)."""
        entries = self._read_state_file()
        with self._lock:
            self._entries = entries

    def _read_state_file(self) -> dict[str, LinkRecord]:
        if not self._state_file.exists():
            return {}
        try:
            raw = json.loads(self._state_file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Failed to load state from %s: %s", self._state_file, exc)
            return {}

        if not isinstance(raw, dict):
            logger.warning("Failed to load state from %s: expected a JSON object", self._state_file)
            return {}

        entries: dict[str, LinkRecord] = {}
        try:
            for name, value in raw.items():
                record = LinkRecord.model_validate(value)
                if record.symlink_name != name:
                    record = record.model_copy(update={"symlink_name": name})
                entries[name] = record
        except ValidationError as exc:
            logger.warning("Failed to load state from %s: %s", self._state_file, exc)
            return {}
        return entries

    def save(self) -> bool:
        """Write the current snapshot to disk. Returns False (and logs) on failure."""
        with self._write_lock:
            with self._lock:
                snapshot = {name: record.to_json_dict() for name, record in self._entries.items()}
            return self._write_snapshot(snapshot)

    def flush(self) -> None:
        """Wait for an in-flight write, then write the latest snapshot."""
        self.save()

    def _write_snapshot(self, snapshot: dict[str, dict[str, str]]) -> bool:
        path = self._state_file
        tmp_path: Path | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            content = json.dumps(snapshot, indent=2, sort_keys=True)
            # Write via NamedTemporaryFile in target directory to avoid cross-device issues
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=path.parent,
                delete=False,
                prefix="state.",
                suffix=".tmp",
            ) as fh:
                tmp_path = Path(fh.name)
                fh.write(content)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, path)
        except OSError as exc:
            logger.error("Failed to save state to %s: %s", path, exc)
            if tmp_path is not None:
                with suppress(OSError):
                    tmp_path.unlink()
            return False
        return True

    # Access

    def get(self, symlink_name: str) -> LinkRecord | None:
        with self._lock:
            return self._entries.get(symlink_name)

    def set(self, record: LinkRecord) -> None:
        """Insert or replace the record keyed by its symlink name, then persist."""
        with self._lock:
            self._entries[record.symlink_name] = record
        self.save()

    def remove(self, symlink_name: str) -> bool:
        """Delete a record, then persist. Returns False when the name was not tracked."""
        with self._lock:
            removed = self._entries.pop(symlink_name, None) is not None
        if removed:
            self.save()
        return removed

    def touch(self, symlink_name: str, timestamp: datetime) -> bool:
        """Refresh a record's timestamp in one step, then persist.

        Returns False (and writes nothing) when the name is no longer tracked.
        """
        with self._lock:
            record = self._entries.get(symlink_name)
            if record is None:
                return False
            self._entries[symlink_name] = record.touched(timestamp)
        self.save()
        return True

    def remove_record(self, record: LinkRecord) -> bool:
        """Delete ``record`` only if it is still the stored version, then persist.

        A record refreshed or replaced since it was read is left alone.
        """
        with self._lock:
            if self._entries.get(record.symlink_name) != record:
                return False
            del self._entries[record.symlink_name]
        self.save()
        return True

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
        self.save()

    def all_entries(self) -> dict[str, LinkRecord]:
        """Point-in-time snapshot of the mapping."""
        with self._lock:
            return dict(self._entries)

    def sorted_by_age(self) -> list[tuple[str, LinkRecord]]:
        """Snapshot sorted oldest first; ties broken by name."""
        snapshot = self.all_entries()
        return sorted(snapshot.items(), key=lambda item: (item[1].timestamp, item[0]))

    def find_by_original_path(self, original_path: str) -> str | None:
        """Name of the record pointing at ``original_path``, if any (linear scan)."""
        with self._lock:
            for name, record in self._entries.items():
                if record.original_path == original_path:
                    return name
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, symlink_name: object) -> bool:
        with self._lock:
            return symlink_name in self._entries
