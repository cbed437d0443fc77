"""Top-level recent-work configuration."""

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .normalize_path import normalize_path
from .RetentionConfig import RetentionConfig

# Always included so directories created later are picked up on restart.
CANDIDATE_WATCH_DIRS: list[str] = [
    "~/Documents",
    "~/Desktop",
    "~/Downloads",
    "~/Projects",
    "~/Developer",
    "~/repos",
    "~/Code",
    "~/src",
]

DEFAULT_IGNORED_DIRS: list[str] = ["~/Library", "~/.Trash"]

STATE_DIR_NAME = ".recent-work"
STATE_FILE_NAME = "state.json"


class RecentWorkConfig(BaseModel):
    """Per-run configuration: what to watch, where to link, how long to keep."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    watch: list[str] = Field(default_factory=lambda: list(CANDIDATE_WATCH_DIRS))
    output_dir: str = Field("~/RecentWork", description="Directory holding the symlinks")
    retention: RetentionConfig = Field(default_factory=RetentionConfig)
    debounce_secs: float = Field(2.0, gt=0, description="Quiet window before a changed file is tracked")
    prune_interval_secs: float = Field(60.0, gt=0, description="Interval between periodic prune cycles")
    ignored_dirs: list[str] = Field(default_factory=lambda: list(DEFAULT_IGNORED_DIRS))

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get home directory based on RECENT_WORK_HOME or default to ~/.recent-work."""
        home_env = os.environ.get("RECENT_WORK_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".recent-work"

    @classmethod
    def get_config_path(cls) -> Path:
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "RecentWorkConfig":
        """Load and validate config from file.

        A missing config file yields the defaults.

        Raises:
            ValueError: If the config file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object, got {type(raw).__name__}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def save(self) -> None:
        """Save the configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=path.parent,
                delete=False,
                prefix="config.",
                suffix=".tmp",
            ) as fh:
                temp_path = Path(fh.name)
                json.dump(self.to_dict(), fh, indent=4)
            os.replace(temp_path, path)
        except OSError as e:
            with suppress(OSError):
                if temp_path is not None:
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e

    @property
    def output_path(self) -> Path:
        return normalize_path(self.output_dir)

    @property
    def state_dir(self) -> Path:
        """``<output>/.recent-work``"""
        return self.output_path / STATE_DIR_NAME

    @property
    def state_file(self) -> Path:
        """``<output>/.recent-work/state.json``"""
        return self.state_dir / STATE_FILE_NAME

    @property
    def watch_paths(self) -> list[Path]:
        # Deduplicate, preserving order
        unique: list[Path] = []
        for p in (normalize_path(w) for w in self.watch):
            if p not in unique:
                unique.append(p)
        return unique

    @property
    def ignored_paths(self) -> list[Path]:
        return [normalize_path(p) for p in self.ignored_dirs]

    def detect_watch_dirs(self) -> list[tuple[Path, bool]]:
        """Return (path, exists) pairs for each configured watch directory."""
        return [(p, p.is_dir()) for p in self.watch_paths]
