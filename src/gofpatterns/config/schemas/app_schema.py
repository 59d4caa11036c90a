"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, ValidationError

from gofpatterns.domain.core.exceptions import ConfigurationError

from .demo_schema import DemoConfig
from .logging_schema import LoggingConfig
from .output_schema import OutputConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    demos: DemoConfig = Field(default_factory=lambda: DemoConfig())
    output: OutputConfig = Field(default_factory=lambda: OutputConfig())


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate configuration.

    Args:
        config: Configuration to validate

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If configuration is invalid
    """
    try:
        return AppConfig(**config)
    except ValidationError as e:
        raise ConfigurationError("Invalid configuration", details=e.errors()) from e
