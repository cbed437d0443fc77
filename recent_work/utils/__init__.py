"""Shared helpers."""

from .logger import configure_logging, get_logger
from .now_utc import now_utc

__all__ = ["configure_logging", "get_logger", "now_utc"]
