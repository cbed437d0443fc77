"""Tracker status command (reads the persisted state)."""

from collections.abc import Iterator

from ..config.RecentWorkConfig import RecentWorkConfig
from ..StageResult import StageResult
from ..state.StateStore import StateStore
from ._lock_file import read_running_pid
from ._lock_path import _lock_path
from ._record_rows import _record_counts


def cmd_status() -> StageResult:
    """Report whether the tracker runs, how many files it tracks and what it watches."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = RecentWorkConfig.load()
        except ValueError as exc:
            result_obj.result = f"Error checking status: {exc}"
            result_obj.output = {"errors": [str(exc)], "warnings": [], "running": False, "pid": None}
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.4, "Checking tracker process...")
        pid = read_running_pid(_lock_path())

        yield (0.7, "Reading state...")
        store = StateStore(config.state_file)
        store.load()
        counts = _record_counts(store)

        warnings: list[str] = []
        watch_dirs = []
        for path, exists in config.detect_watch_dirs():
            watch_dirs.append({"path": str(path), "exists": exists})
        if not any(d["exists"] for d in watch_dirs):
            warnings.append("None of the configured watch directories exist")

        result_obj.result = f"Tracker {'running' if pid else 'stopped'}, {counts['tracked']} file(s) tracked"
        result_obj.output = {
            "errors": [],
            "warnings": warnings,
            "running": pid is not None,
            "pid": pid,
            "tracked": counts["tracked"],
            "broken": counts["broken"],
            "max_files": config.retention.max_files,
            "max_age_hours": config.retention.max_age_hours,
            "watch_dirs": watch_dirs,
            "output_dir": str(config.output_path),
        }
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Checking tracker status...",
        progress_callback=do_work,
    )
