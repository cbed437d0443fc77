"""Remove all symlinks and reset state."""

from collections.abc import Iterator

from ..config.RecentWorkConfig import RecentWorkConfig
from ..StageResult import StageResult
from ..state.StateStore import StateStore
from ..symlink.SymlinkManager import SymlinkManager
from ._lock_file import read_running_pid
from ._lock_path import _lock_path


def cmd_clear() -> StageResult:
    """Delete every tracked symlink and clear the state file (tracker must be stopped)."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Checking tracker process...")
        pid = read_running_pid(_lock_path())
        if pid is not None:
            # The running tracker would rewrite the state from memory
            result_obj.result = "Cannot clear while tracker is running"
            result_obj.output = {
                "errors": [f"Tracker is running (pid {pid})"],
                "warnings": [],
                "cleared": 0,
            }
            result_obj.success = False
            yield (1.0, "Complete")
            return

        try:
            config = RecentWorkConfig.load()
        except ValueError as exc:
            result_obj.result = f"Error clearing files: {exc}"
            result_obj.output = {"errors": [str(exc)], "warnings": [], "cleared": 0}
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.4, "Reading state...")
        store = StateStore(config.state_file)
        store.load()
        if len(store) == 0:
            result_obj.result = "No tracked files to clear"
            result_obj.output = {"errors": [], "warnings": [], "cleared": 0}
            result_obj.success = True
            yield (1.0, "Complete")
            return

        yield (0.6, "Removing symlinks...")
        cleared = SymlinkManager(config.output_path, store).remove_all()

        result_obj.result = f"Cleared {cleared} symlink(s)"
        result_obj.output = {"errors": [], "warnings": [], "cleared": cleared}
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Clearing tracked files...",
        progress_callback=do_work,
    )
