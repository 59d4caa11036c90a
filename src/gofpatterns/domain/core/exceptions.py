# src/gofpatterns/domain/core/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all gof-patterns errors."""
    pass


class ValidationError(DomainException):
    """Raised when validation of user supplied values fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class DemoNotFoundError(DomainException):
    """Raised when a requested demo is not registered."""
    def __init__(self, name: str, available: Optional[List[str]] = None):
        self.name = name
        self.available = sorted(available or [])
        message = f"Demo '{name}' not found"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class SingletonError(DomainException):
    """Raised when the singleton registry is used inconsistently."""
    def __init__(self, singleton_class: type, message: str):
        super().__init__(f"{singleton_class.__name__}: {message}")
        self.singleton_class = singleton_class
