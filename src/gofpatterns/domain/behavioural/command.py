"""Command Design Pattern.

Intent: Turns a request into a stand-alone object that contains all
information about the request. This transformation lets you parameterize
methods with different requests, delay or queue a request's execution, and
support undoable operations.

Roles:
    - Editor is the receiver: every command ends up calling its methods.
    - Application is the invoker: it executes commands and keeps the history.
    - CommandHistory is a plain stack of the commands that changed an editor.

Undo is history based: UndoCommand pops the most recent recorded command and
asks it to restore the text it backed up before running.
"""
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

from gofpatterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Editor:
    """Holds the text that commands operate on."""

    def __init__(self, text: str = ""):
        self._text = text

    def get_text(self) -> str:
        return self._text

    def remove_text(self) -> None:
        self._text = ""

    def set_text(self, text: str) -> None:
        self._text = text

    def __repr__(self) -> str:
        return f"Editor(text={self._text!r})"


class UICommand(ABC):
    """
    Base command bound to an application and the editor it acts on.

    backup is empty until save_backup() runs, so undoing a command that never
    saved one clears the editor.
    """

    def __init__(self, app: "Application", editor: Editor):
        self.app = app
        self.editor = editor
        self.backup = ""

    def save_backup(self) -> None:
        self.backup = self.editor.get_text()

    def undo(self) -> None:
        self.editor.set_text(self.backup)

    @abstractmethod
    def execute(self) -> bool:
        """
        Run the command.

        Returns:
            True if the command changed the editor and must be recorded
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(editor={self.editor!r}, backup={self.backup!r})"


class CopyCommand(UICommand):
    """Copies the editor's text to the clipboard. Not recorded."""

    def execute(self) -> bool:
        self.app.clipboard = self.editor.get_text()
        return False


class CutCommand(UICommand):
    def execute(self) -> bool:
        self.save_backup()
        self.app.clipboard = self.editor.get_text()
        self.editor.remove_text()
        return True


class PasteCommand(UICommand):
    def execute(self) -> bool:
        self.save_backup()
        self.editor.set_text(self.app.clipboard)
        return True


class UndoCommand(UICommand):
    """Reverts the most recently recorded command.

    The reverted command restores its own editor, which is not necessarily
    the one this command was created with. Undo itself is never recorded.
    """

    def execute(self) -> bool:
        command = self.app.history.pop()
        if command is None:
            logger.debug("Nothing to undo")
            return False
        command.undo()
        logger.debug("Undid command", command=type(command).__name__)
        return False


class CommandHistory:
    """Stack of executed commands."""

    def __init__(self) -> None:
        self._history: List[UICommand] = []

    def push(self, command: UICommand) -> None:
        self._history.append(command)

    def pop(self) -> Optional[UICommand]:
        """Remove and return the latest command, or None when empty."""
        if not self._history:
            return None
        return self._history.pop()

    def peek(self) -> Optional[UICommand]:
        return self._history[-1] if self._history else None

    def __len__(self) -> int:
        return len(self._history)

    def __iter__(self) -> Iterator[UICommand]:
        return iter(list(self._history))

    def __repr__(self) -> str:
        names = ", ".join(type(command).__name__ for command in self._history)
        return f"CommandHistory([{names}])"


class Application:
    """Sets up object relations and acts as the sender of commands."""

    def __init__(self, editors: Optional[List[Editor]] = None):
        self.clipboard = ""
        self.editors: List[Editor] = list(editors) if editors else []
        self.active_editor = self.editors[0] if self.editors else Editor()
        self.history = CommandHistory()

    def execute_command(self, command: UICommand) -> bool:
        """
        Execute a command and record it if it reports a change.

        Returns:
            Whether the command was pushed onto the history
        """
        recorded = bool(command.execute())
        if recorded:
            self.history.push(command)
        logger.debug(
            "Executed command",
            command=type(command).__name__,
            recorded=recorded,
            history_size=len(self.history),
        )
        return recorded

    def copy(self) -> bool:
        return self.execute_command(CopyCommand(self, self.active_editor))

    def cut(self) -> bool:
        return self.execute_command(CutCommand(self, self.active_editor))

    def paste(self) -> bool:
        return self.execute_command(PasteCommand(self, self.active_editor))

    def undo(self) -> bool:
        return self.execute_command(UndoCommand(self, self.active_editor))
