"""Retention configuration."""

from pydantic import BaseModel, ConfigDict, Field


class RetentionConfig(BaseModel):
    """Limits bounding the set of tracked files."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_files: int = Field(100, gt=0, description="Maximum number of symlinks kept in the output directory")
    max_age_hours: float = Field(48, gt=0, description="Symlinks older than this many hours are pruned")
