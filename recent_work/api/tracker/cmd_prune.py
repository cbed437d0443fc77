"""Run one prune cycle against the persisted state."""

from collections.abc import Iterator

from ..config.RecentWorkConfig import RecentWorkConfig
from ..prune.Pruner import Pruner
from ..StageResult import StageResult
from ..state.StateStore import StateStore
from ._lock_file import read_running_pid
from ._lock_path import _lock_path


def cmd_prune() -> StageResult:
    """Drop dangling, expired and over-limit links (tracker must be stopped)."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Checking tracker process...")
        pid = read_running_pid(_lock_path())
        if pid is not None:
            result_obj.result = "Tracker is running and prunes on its own"
            result_obj.output = {
                "errors": [f"Tracker is running (pid {pid})"],
                "warnings": [],
                "pruned": {},
            }
            result_obj.success = False
            yield (1.0, "Complete")
            return

        try:
            config = RecentWorkConfig.load()
        except ValueError as exc:
            result_obj.result = f"Error pruning: {exc}"
            result_obj.output = {"errors": [str(exc)], "warnings": [], "pruned": {}}
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.4, "Reading state...")
        store = StateStore(config.state_file)
        store.load()

        yield (0.6, "Pruning...")
        pruner = Pruner(
            config.output_path,
            store,
            max_files=config.retention.max_files,
            max_age_hours=config.retention.max_age_hours,
        )
        pruned = pruner.prune()

        result_obj.result = f"Pruned {pruned.total} symlink(s), {len(store)} remaining"
        result_obj.output = {"errors": [], "warnings": [], "pruned": pruned.to_dict(), "remaining": len(store)}
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Pruning tracked files...",
        progress_callback=do_work,
    )
