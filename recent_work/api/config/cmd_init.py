"""Write a default configuration file."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .RecentWorkConfig import RecentWorkConfig


def cmd_init(force: bool = False) -> StageResult:
    """Write the default configuration to the config path.

    An existing file is kept unless ``force`` is set.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = RecentWorkConfig.get_config_path()
        yield (0.3, "Checking for existing configuration...")
        if config_path.exists() and not force:
            result_obj.result = f"Config file already exists: {config_path}"
            result_obj.output = {
                "errors": [f"{config_path} exists; use --force to overwrite"],
                "warnings": [],
                "config_path": str(config_path),
                "content": {},
            }
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.6, "Writing default configuration...")
        config = RecentWorkConfig()
        try:
            config.save()
        except RuntimeError as exc:
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

        result_obj.result = f"Wrote default configuration to {config_path}"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "config_path": str(config_path),
            "content": config.to_dict(),
        }
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Initializing configuration...",
        progress_callback=do_work,
    )
