"""Singleton Registry - process-wide store of one instance per class.

The registry is itself a singleton. Instances are keyed by their exact class,
so a subclass of a registered class gets its own single instance.
"""

import threading
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from gofpatterns.domain.core.exceptions import SingletonError
from gofpatterns.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Registry holding at most one instance of each registered class.

    Creation happens lazily on first access and is guarded by a re-entrant
    lock, so concurrent first accesses still produce a single instance and a
    factory may itself look up other singletons.

    Thread-safe singleton implementation.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        self._instances: Dict[type, Any] = {}
        self._registry_lock = threading.RLock()
        self.logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Return the process-wide registry, creating it on first use."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(
        self,
        singleton_class: Type[T],
        *args: Any,
        factory: Optional[Callable[..., T]] = None,
        **kwargs: Any,
    ) -> T:
        """
        Get the instance of singleton_class, creating it if needed.

        Args:
            singleton_class: Class whose single instance is requested
            *args: Arguments for the factory if an instance must be created
            factory: Callable building the instance; defaults to the class itself
            **kwargs: Keyword arguments for the factory

        Returns:
            The single instance of singleton_class
        """
        instance = self._instances.get(singleton_class)
        if instance is not None:
            return instance

        with self._registry_lock:
            instance = self._instances.get(singleton_class)
            if instance is None:
                create = factory if factory is not None else singleton_class
                instance = create(*args, **kwargs)
                self._instances[singleton_class] = instance
                self.logger.debug("Created singleton instance", singleton=singleton_class.__name__)
        return instance

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """
        Register an already built instance.

        Raises:
            SingletonError: If a different instance is already registered
        """
        with self._registry_lock:
            existing = self._instances.get(singleton_class)
            if existing is not None and existing is not instance:
                raise SingletonError(singleton_class, "a different instance is already registered")
            self._instances[singleton_class] = instance
            self.logger.debug("Registered singleton instance", singleton=singleton_class.__name__)

    def has(self, singleton_class: type) -> bool:
        """Check whether an instance of singleton_class exists."""
        return singleton_class in self._instances

    def registered_classes(self) -> List[type]:
        """Classes that currently have an instance."""
        with self._registry_lock:
            return list(self._instances)

    def reset(self) -> None:
        """Forget every instance. Only meant for test isolation."""
        with self._registry_lock:
            self._instances.clear()
            self.logger.debug("Singleton registry reset")
