"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .demo_schema import DemoConfig, LevelBoundsConfig
from .logging_schema import LogDestination, LoggingConfig, LogLevel
from .output_schema import OutputConfig, OutputFormat

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # Logging configuration
    "LoggingConfig",
    "LogLevel",
    "LogDestination",
    # Demo configuration
    "DemoConfig",
    "LevelBoundsConfig",
    # Output configuration
    "OutputConfig",
    "OutputFormat",
]
