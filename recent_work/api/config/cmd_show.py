"""Show configuration command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .RecentWorkConfig import RecentWorkConfig


def cmd_show() -> StageResult:
    """Show the effective configuration (file values merged over defaults)."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        config_path = RecentWorkConfig.get_config_path()
        try:
            config = RecentWorkConfig.load()
        except ValueError as exc:
            result_obj.result = str(exc)
            result_obj.output = {
                "errors": [str(exc)],
                "warnings": [],
                "config_path": str(config_path),
                "content": {},
            }
            result_obj.success = False
            yield (1.0, "Complete")
            return

        warnings: list[str] = []
        if not config_path.exists():
            warnings.append(f"No config file at {config_path}; using defaults")

        result_obj.result = "Configuration loaded"
        result_obj.output = {
            "errors": [],
            "warnings": warnings,
            "config_path": str(config_path),
            "content": config.to_dict(),
        }
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Loading configuration...",
        progress_callback=do_work,
    )
