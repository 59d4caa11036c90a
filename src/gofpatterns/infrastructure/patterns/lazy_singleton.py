"""Guarded lazy-initialization cell."""

import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class LazySingleton(Generic[T]):
    """Holds a value built by ``factory`` on first access, exactly once.

    Unlike the registry, a cell is an explicit handle: callers pass it (or the
    function that reads it) around instead of reaching for a class attribute.
    """

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._value: Optional[T] = None
        self._initialized = False
        self._lock = threading.Lock()

    def get(self) -> T:
        """Return the value, building it on first call."""
        if not self._initialized:
            with self._lock:
                if not self._initialized:
                    self._value = self._factory()
                    self._initialized = True
        return self._value  # type: ignore[return-value]

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def reset(self) -> None:
        """Drop the cached value. Only meant for test isolation."""
        with self._lock:
            self._value = None
            self._initialized = False
