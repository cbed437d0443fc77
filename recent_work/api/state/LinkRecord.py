"""Link record model."""

import os
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps on disk are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class LinkRecord(BaseModel):
    """Persisted metadata for one tracked file.

    Serialized with camelCase keys (``originalPath``, ``symlinkName``) and an
    ISO-8601 ``timestamp``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    original_path: str = Field(..., alias="originalPath", min_length=1)
    timestamp: datetime
    symlink_name: str = Field(..., alias="symlinkName", min_length=1)

    @field_validator("timestamp")
    @classmethod
    def validate_timestamp(cls, value: datetime) -> datetime:
        return _as_utc(value)

    def is_broken(self) -> bool:
        """True when the target file no longer exists."""
        return not os.path.exists(self.original_path)

    def touched(self, timestamp: datetime) -> "LinkRecord":
        """Copy of this record with a new timestamp."""
        return self.model_copy(update={"timestamp": _as_utc(timestamp)})

    def to_json_dict(self) -> dict[str, str]:
        return self.model_dump(mode="json", by_alias=True)
