"""PID lock file for a foreground tracker run."""

import os
from contextlib import suppress
from pathlib import Path


def _pid_running(pid: int) -> bool:
    """Check if a process with the given PID is running."""
    try:
        os.kill(pid, 0)  # Signal 0 checks existence without killing
    except ProcessLookupError:
        return False
    except PermissionError:
        return True
    except OSError:
        return False
    return True


def read_running_pid(lock_path: Path) -> int | None:
    """PID recorded in ``lock_path`` if that process is alive, else None."""
    if not lock_path.exists():
        return None
    try:
        pid = int(lock_path.read_text(encoding="utf-8").strip())
    except (OSError, ValueError):
        return None
    if pid <= 0 or not _pid_running(pid):
        return None
    return pid


def write_lock(lock_path: Path) -> None:
    lock_path.parent.mkdir(parents=True, exist_ok=True)
    lock_path.write_text(str(os.getpid()), encoding="utf-8")


def release_lock(lock_path: Path) -> None:
    with suppress(OSError):
        lock_path.unlink()
