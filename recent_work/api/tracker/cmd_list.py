"""List tracked symlinks and their targets."""

from collections.abc import Iterator

from ...utils.now_utc import now_utc
from ..config.RecentWorkConfig import RecentWorkConfig
from ..StageResult import StageResult
from ..state.StateStore import StateStore
from ._record_rows import _record_rows


def cmd_list() -> StageResult:
    """List current symlinks, newest first, flagging broken targets."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = RecentWorkConfig.load()
        except ValueError as exc:
            result_obj.result = f"Error listing files: {exc}"
            result_obj.output = {"errors": [str(exc)], "warnings": [], "files": [], "count": 0}
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.6, "Reading state...")
        store = StateStore(config.state_file)
        store.load()
        rows = _record_rows(store, now_utc())

        result_obj.result = f"{len(rows)} file(s)" if rows else "No tracked files"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "files": rows,
            "count": len(rows),
        }
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Listing tracked files...",
        progress_callback=do_work,
    )
