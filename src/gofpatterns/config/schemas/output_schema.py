"""Output configuration schema."""

from enum import Enum

from pydantic import BaseModel, Field


class OutputFormat(str, Enum):
    """Rendering applied to CLI results."""
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"


class OutputConfig(BaseModel):
    """Output configuration."""

    default_format: OutputFormat = Field(
        OutputFormat.TEXT, description="Format used when --format is not given"
    )
