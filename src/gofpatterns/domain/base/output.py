"""Concrete OutputPort implementations."""
import sys
from typing import List, Optional, TextIO

from .ports.output_port import OutputPort


class ConsoleOutput(OutputPort):
    """Writes lines to a text stream, stdout by default."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def write(self, line: str) -> None:
        # Resolve stdout lazily so redirection (and pytest capture) is honoured
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{line}\n")


class RecordingOutput(OutputPort):
    """Keeps every written line in memory."""

    def __init__(self) -> None:
        self._lines: List[str] = []

    def write(self, line: str) -> None:
        self._lines.append(line)

    @property
    def lines(self) -> List[str]:
        """Lines written so far, oldest first."""
        return list(self._lines)

    def clear(self) -> None:
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)


def resolve_output(output: Optional[OutputPort]) -> OutputPort:
    """Return the given port, or a console port when none was supplied."""
    return output if output is not None else ConsoleOutput()
