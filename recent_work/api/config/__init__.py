"""Configuration for the recent-work tracker."""

from .RecentWorkConfig import RecentWorkConfig
from .RetentionConfig import RetentionConfig

__all__ = ["RecentWorkConfig", "RetentionConfig"]
