"""Core domain definitions shared by every layer."""

from .exceptions import (
    ConfigurationError,
    DemoNotFoundError,
    DomainException,
    SingletonError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "ConfigurationError",
    "DemoNotFoundError",
    "SingletonError",
]
