"""Base domain building blocks - foundation for all demos."""

from .output import ConsoleOutput, RecordingOutput, resolve_output
from .ports import OutputPort

__all__ = ["OutputPort", "ConsoleOutput", "RecordingOutput", "resolve_output"]
