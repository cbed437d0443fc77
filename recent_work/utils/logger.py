import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(home: Path | None = None, *, console: bool = False, level: int = logging.INFO) -> None:
    """Configure unified recent-work logging.

    Args:
        home: Path to the recent-work home directory. If None, derived from environment.
        console: Also log to stderr (foreground runs).
        level: Level for the ``recent_work`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        env_home = os.environ.get("RECENT_WORK_HOME")
        home = Path(env_home).expanduser().resolve() if env_home else Path.home() / ".recent-work"

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "recent-work.log"

    root_logger = logging.getLogger("recent_work")
    root_logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    if console:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Handlers are installed by ``configure_logging`` at the application entry point;
    until then records propagate to whatever the host process configured.
    """
    return logging.getLogger(f"recent_work.{name}")
