"""PID lock file helpers."""

import os

import pytest

from recent_work.api.tracker._lock_file import read_running_pid, release_lock, write_lock

pytestmark = pytest.mark.tracker


def test_write_read_release(tmp_path):
    lock = tmp_path / "home" / "tracker.lock"
    assert read_running_pid(lock) is None

    write_lock(lock)
    assert read_running_pid(lock) == os.getpid()

    release_lock(lock)
    assert not lock.exists()
    release_lock(lock)


@pytest.mark.parametrize("content", ["", "garbage", "-5", "0", "999999999"])
def test_invalid_or_dead_pid(tmp_path, content):
    lock = tmp_path / "tracker.lock"
    lock.write_text(content)
    assert read_running_pid(lock) is None
