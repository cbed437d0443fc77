"""Public API for recent-work domains."""

from .StageResult import StageResult

__all__ = ["StageResult"]
