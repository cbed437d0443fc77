"""UTC clock helper."""

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Get current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
