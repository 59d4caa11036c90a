"""Logging configuration schema."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    STDERR = "stderr"
    FILE = "file"
    BOTH = "both"
    NONE = "none"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Minimum log level")
    destination: LogDestination = Field(
        LogDestination.STDERR, description="Where diagnostic logs are written"
    )
    file_path: str = Field(
        "${GOF_PATTERNS_LOGDIR:logs}/gof-patterns.log", description="Log file path"
    )
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(5, description="Number of rotated log files to keep")
    format: str = Field("%(message)s", description="stdlib formatter format string")

    @field_validator("level", mode="before")
    @classmethod
    def normalise_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rotation settings."""
        if v < 0:
            raise ValueError("Rotation settings must not be negative")
        return v
