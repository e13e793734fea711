"""Configuration model with validation."""
from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


DEFAULT_MAX_SYMLINK_HOPS = 64


class LogLevel(str, Enum):
    """Log level names accepted by ``setup_logging``."""
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


class CoreConfig(BaseModel):
    """Settings for path resolution and subtitle discovery."""
    max_symlink_hops: int = Field(
        default=DEFAULT_MAX_SYMLINK_HOPS,
        ge=1,
        description="Hop budget for manual symlink resolution",
    )
    video_type_prefix: str = Field(
        default="video",
        description="Media-type prefix that enables subtitle detection",
    )
    log_level: LogLevel = Field(
        default=LogLevel.info,
        description="Log level for the browsecore logger",
    )

    @field_validator("video_type_prefix")
    @classmethod
    def normalize_prefix(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("video_type_prefix must not be empty")
        return value

    @classmethod
    def from_file(cls, path: Path) -> "CoreConfig":
        """Load configuration from a JSON file."""
        return cls.model_validate_json(Path(path).expanduser().read_text(encoding="utf-8"))
