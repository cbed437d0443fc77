"""Run the tracker (foreground blocking)."""

import sys

from ...utils.logger import configure_logging
from ..config.RecentWorkConfig import RecentWorkConfig
from ._lock_file import read_running_pid, release_lock, write_lock
from ._lock_path import _lock_path
from .Tracker import Tracker


def cmd_run() -> None:
    """Run the tracker in the foreground until SIGTERM/SIGINT.

    Only one tracker may run per home directory at a time.
    """
    try:
        config = RecentWorkConfig.load()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    configure_logging(RecentWorkConfig.get_home_dir(), console=True)

    lock_path = _lock_path()
    existing_pid = read_running_pid(lock_path)
    if existing_pid is not None:
        print(f"Error: Tracker already running (pid {existing_pid})", file=sys.stderr)
        raise SystemExit(1)

    write_lock(lock_path)
    try:
        Tracker(config).run()
    except RuntimeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    except KeyboardInterrupt:
        # Allow clean exit on Ctrl+C
        pass
    finally:
        release_lock(lock_path)
