"""Singleton Design Pattern.

Intent: Lets you ensure that a class has only one instance, while providing a
global access point to this instance.

The instance lives in the process-wide SingletonRegistry, which creates it
lazily under a lock on first access. Calling the class directly does not
build a second object; it resolves to the same instance as get_instance().
Each subclass gets its own single instance.
"""
from typing import Optional, Type, TypeVar

from gofpatterns.domain.base.output import resolve_output
from gofpatterns.domain.base.ports.output_port import OutputPort
from gofpatterns.infrastructure.logging.logger import get_logger
from gofpatterns.infrastructure.patterns.singleton_access import get_singleton

logger = get_logger(__name__)

R = TypeVar("R", bound="Repository")


class Repository:
    """Process-wide repository. Use Repository.get_instance()."""

    def __new__(cls):
        return cls.get_instance()

    @classmethod
    def get_instance(cls: Type[R]) -> R:
        """Return the single instance, creating it on first access."""
        return get_singleton(cls, factory=cls._create)

    @classmethod
    def _create(cls: Type[R]) -> R:
        instance = object.__new__(cls)
        instance._setup()
        logger.debug("Repository instance created", repository=cls.__name__)
        return instance

    def _setup(self) -> None:
        self.business_calls = 0

    def some_business_logic(self) -> None:
        self.business_calls += 1


def check_singleton(first: object, second: object, output: Optional[OutputPort] = None) -> bool:
    """Report whether both references point at the same instance."""
    output = resolve_output(output)
    same = first is second
    if same:
        output.write("Singleton works, both variables contain the same instance.")
    else:
        output.write("Singleton failed, variables contain different instances.")
    return same
