"""Infrastructure patterns package."""

from gofpatterns.infrastructure.patterns.lazy_singleton import LazySingleton
from gofpatterns.infrastructure.patterns.singleton_access import get_singleton
from gofpatterns.infrastructure.patterns.singleton_registry import SingletonRegistry

__all__ = ["SingletonRegistry", "get_singleton", "LazySingleton"]
