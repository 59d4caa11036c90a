"""Strategy Design Pattern.

Intent: Lets you define a family of algorithms, put each of them into a
separate class, and make their objects interchangeable.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from gofpatterns.domain.base.output import resolve_output
from gofpatterns.domain.base.ports.output_port import OutputPort
from gofpatterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

DEFAULT_SAMPLE = ("c", "e", "a", "d", "b")


class ExtractDataStrategy(ABC):
    """
    Operation common to every supported extraction algorithm.

    Implementations return a new list and leave their input untouched.
    """

    @abstractmethod
    def extract_data(self, data: Sequence[str]) -> List[str]:
        """Extract data from the given sequence."""

    def __str__(self) -> str:
        return type(self).__name__


class RoomDataStrategy(ExtractDataStrategy):
    def extract_data(self, data: Sequence[str]) -> List[str]:
        return sorted(data)


class DeskDataStrategy(ExtractDataStrategy):
    def extract_data(self, data: Sequence[str]) -> List[str]:
        return list(reversed(data))


class SensorDataStrategy(ExtractDataStrategy):
    def extract_data(self, data: Sequence[str]) -> List[str]:
        return sorted(data, reverse=True)


class ExtractDataService:
    """
    The context clients talk to.

    It holds one strategy at a time, accepted through the constructor and
    replaceable at runtime, and delegates the extraction to it without
    knowing its concrete class.
    """

    def __init__(self, strategy: ExtractDataStrategy, output: Optional[OutputPort] = None):
        self._strategy = strategy
        self.output = resolve_output(output)

    @property
    def strategy(self) -> ExtractDataStrategy:
        return self._strategy

    def set_strategy(self, strategy: ExtractDataStrategy) -> None:
        logger.debug("Strategy replaced", previous=str(self._strategy), current=str(strategy))
        self._strategy = strategy

    def do_some_business_logic(self, data: Optional[Sequence[str]] = None) -> List[str]:
        """
        Extract data with the current strategy and report the result.

        Args:
            data: Input sequence; the sample ['c', 'e', 'a', 'd', 'b'] by default

        Returns:
            The extracted data
        """
        if data is None:
            data = DEFAULT_SAMPLE
        self.output.write(
            f"ExtractDataService: extracting data using {self._strategy} strategy "
            "(not sure how it'll do it)"
        )
        result = self._strategy.extract_data(data)
        self.output.write(",".join(result))
        return result
