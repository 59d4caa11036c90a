"""Output Port - Interface for the human-readable lines a demo emits.

Every role object and composition wrapper narrates what it does by writing
lines to an OutputPort instead of printing directly. The driving scripts decide
where those lines end up: the console, or an in-memory buffer that the CLI
renders as JSON/YAML/table output.
"""
from abc import ABC, abstractmethod


class OutputPort(ABC):
    """Port for emitting demo output lines."""

    @abstractmethod
    def write(self, line: str) -> None:
        """Emit a single line of output.

        Args:
            line: The text to emit, without a trailing newline
        """
