"""StateStore persistence and queries."""

import json
import os
import threading
from datetime import datetime, timedelta, timezone

import pytest

from recent_work.api.state.LinkRecord import LinkRecord
from recent_work.api.state.StateStore import StateStore

pytestmark = pytest.mark.state

TS = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def _record(name: str, hours: float = 0, target: str | None = None) -> LinkRecord:
    return LinkRecord(
        original_path=target or f"/src/{name}",
        timestamp=TS + timedelta(hours=hours),
        symlink_name=name,
    )


def test_set_persists_and_reload_round_trips(state_store):
    state_store.set(_record("a.txt"))
    state_store.set(_record("b.txt", hours=1))

    reloaded = StateStore(state_store.state_file)
    reloaded.load()

    assert reloaded.all_entries() == state_store.all_entries()
    assert len(reloaded) == 2
    assert "a.txt" in reloaded


def test_state_file_format(state_store):
    state_store.set(_record("b.txt"))
    state_store.set(_record("a.txt"))

    text = state_store.state_file.read_text()
    raw = json.loads(text)
    assert list(raw) == ["a.txt", "b.txt"]
    assert raw["a.txt"]["originalPath"] == "/src/a.txt"
    assert raw["a.txt"]["symlinkName"] == "a.txt"
    assert "timestamp" in raw["a.txt"]


def test_load_missing_file_is_empty(state_store):
    state_store.load()
    assert len(state_store) == 0


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        json.dumps({"a.txt": {"originalPath": "/a"}}),
        json.dumps({"a.txt": {"originalPath": "/a", "timestamp": "yesterday", "symlinkName": "a.txt"}}),
    ],
)
def test_load_unreadable_file_is_empty(state_store, content):
    state_store.state_file.parent.mkdir(parents=True, exist_ok=True)
    state_store.state_file.write_text(content)
    state_store.load()
    assert state_store.all_entries() == {}


def test_load_rekeys_mismatched_name(state_store):
    state_store.state_file.parent.mkdir(parents=True, exist_ok=True)
    state_store.state_file.write_text(
        json.dumps({"key.txt": {"originalPath": "/a", "timestamp": TS.isoformat(), "symlinkName": "other.txt"}})
    )
    state_store.load()
    assert state_store.get("key.txt").symlink_name == "key.txt"


def test_load_replaces_memory(state_store):
    state_store.set(_record("a.txt"))
    state_store.state_file.write_text("{}")
    state_store.load()
    assert state_store.get("a.txt") is None


def test_failed_write_keeps_previous_file(state_store, monkeypatch):
    state_store.set(_record("a.txt"))
    before = state_store.state_file.read_text()

    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", fail_replace)
    state_store.set(_record("b.txt"))
    assert state_store.save() is False
    monkeypatch.undo()

    assert state_store.state_file.read_text() == before
    assert list(state_store.state_file.parent.glob("*.tmp")) == []
    # Memory still reflects the mutation
    assert "b.txt" in state_store


def test_remove(state_store):
    state_store.set(_record("a.txt"))
    assert state_store.remove("a.txt") is True
    assert state_store.remove("a.txt") is False
    reloaded = StateStore(state_store.state_file)
    reloaded.load()
    assert len(reloaded) == 0


def test_clear(state_store):
    state_store.set(_record("a.txt"))
    state_store.set(_record("b.txt"))
    state_store.clear()
    assert len(state_store) == 0
    assert json.loads(state_store.state_file.read_text()) == {}


def test_sorted_by_age_oldest_first_ties_by_name(state_store):
    state_store.set(_record("c.txt", hours=2))
    state_store.set(_record("b.txt", hours=0))
    state_store.set(_record("a.txt", hours=0))

    names = [name for name, _ in state_store.sorted_by_age()]
    assert names == ["a.txt", "b.txt", "c.txt"]


def test_find_by_original_path(state_store):
    state_store.set(_record("x.txt", target="/a/x.txt"))
    assert state_store.find_by_original_path("/a/x.txt") == "x.txt"
    assert state_store.find_by_original_path("/b/x.txt") is None


def test_all_entries_is_a_snapshot(state_store):
    state_store.set(_record("a.txt"))
    snapshot = state_store.all_entries()
    state_store.set(_record("b.txt"))
    assert list(snapshot) == ["a.txt"]


def test_concurrent_sets_all_persist(state_store):
    def worker(start: int) -> None:
        for i in range(start, start + 10):
            state_store.set(_record(f"f{i}.txt"))

    threads = [threading.Thread(target=worker, args=(n * 10,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    state_store.flush()
    reloaded = StateStore(state_store.state_file)
    reloaded.load()
    assert len(reloaded) == 40


def test_touch_updates_only_tracked_names(state_store):
    state_store.set(_record("a.txt"))
    later = TS + timedelta(hours=3)

    assert state_store.touch("a.txt", later) is True
    assert state_store.touch("missing.txt", later) is False

    reloaded = StateStore(state_store.state_file)
    reloaded.load()
    assert reloaded.get("a.txt").timestamp == later
    assert "missing.txt" not in reloaded


def test_remove_record_requires_current_version(state_store):
    original = _record("a.txt")
    state_store.set(original)
    state_store.touch("a.txt", TS + timedelta(hours=1))

    assert state_store.remove_record(original) is False
    assert "a.txt" in state_store

    assert state_store.remove_record(state_store.get("a.txt")) is True
    assert "a.txt" not in state_store
