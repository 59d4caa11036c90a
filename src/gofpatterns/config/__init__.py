"""Configuration package.

Typed configuration lives in ``schemas``; ``gofpatterns.config.manager`` loads
it from an optional JSON/YAML file plus environment overrides. The manager is
not re-exported here because it depends on the logging infrastructure, which
itself reads the logging schema.
"""

from .schemas import AppConfig, DemoConfig, LoggingConfig, OutputConfig, OutputFormat

__all__ = [
    "AppConfig",
    "DemoConfig",
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
]
