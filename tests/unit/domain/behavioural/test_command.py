"""Tests for the Command demo."""

import pytest

from gofpatterns.domain.behavioural.command import (
    Application,
    CommandHistory,
    CopyCommand,
    CutCommand,
    Editor,
    PasteCommand,
    UICommand,
    UndoCommand,
)


@pytest.fixture
def editors():
    return Editor("Smart Building Ltd."), Editor("Smartest Building Ltd.")


@pytest.fixture
def app(editors):
    return Application(list(editors))


class TestEditor:
    """Test cases for the receiver."""

    def test_text_operations(self):
        editor = Editor()
        assert editor.get_text() == ""

        editor.set_text("hello")
        assert editor.get_text() == "hello"

        editor.remove_text()
        assert editor.get_text() == ""


class TestCommands:
    """Test cases for the concrete commands."""

    def test_copy_is_not_recorded(self, app, editors):
        recorded = app.execute_command(CopyCommand(app, editors[0]))

        assert recorded is False
        assert len(app.history) == 0
        assert app.clipboard == "Smart Building Ltd."
        assert editors[0].get_text() == "Smart Building Ltd."

    def test_cut_is_recorded_once(self, app, editors):
        recorded = app.execute_command(CutCommand(app, editors[0]))

        assert recorded is True
        assert len(app.history) == 1
        assert app.clipboard == "Smart Building Ltd."
        assert editors[0].get_text() == ""

    def test_paste_replaces_text_with_clipboard(self, app, editors):
        app.clipboard = "copied"
        command = PasteCommand(app, editors[1])

        assert app.execute_command(command) is True
        assert editors[1].get_text() == "copied"
        assert command.backup == "Smartest Building Ltd."

    def test_backup_is_empty_before_save(self, app, editors):
        command = CopyCommand(app, editors[0])
        assert command.backup == ""

        command.undo()

        assert editors[0].get_text() == ""

    def test_command_undo_restores_own_backup(self, app, editors):
        command = CutCommand(app, editors[0])
        command.execute()

        command.undo()

        assert editors[0].get_text() == "Smart Building Ltd."

    def test_cannot_instantiate_abstract_command(self, app, editors):
        with pytest.raises(TypeError):
            UICommand(app, editors[0])


class TestUndo:
    """Test cases for history based undo."""

    def test_undo_reverts_latest_command(self, app, editors):
        app.execute_command(CutCommand(app, editors[0]))
        app.execute_command(PasteCommand(app, editors[1]))

        app.execute_command(UndoCommand(app, editors[0]))

        assert editors[1].get_text() == "Smartest Building Ltd."
        assert editors[0].get_text() == ""
        assert len(app.history) == 1

    def test_repeated_undo_walks_back_history(self, app, editors):
        app.cut()
        app.paste()

        app.undo()
        app.undo()

        assert editors[0].get_text() == "Smart Building Ltd."
        assert len(app.history) == 0

    def test_undo_with_empty_history_is_noop(self, app, editors):
        assert app.undo() is False
        assert editors[0].get_text() == "Smart Building Ltd."
        assert len(app.history) == 0

    def test_undo_is_never_recorded(self, app):
        app.cut()
        app.undo()
        assert app.history.peek() is None


class TestApplication:
    """Test cases for the invoker."""

    def test_active_editor_defaults_to_first(self, app, editors):
        assert app.active_editor is editors[0]

    def test_application_without_editors(self):
        app = Application()
        assert app.editors == []
        assert isinstance(app.active_editor, Editor)

    def test_shortcuts_target_active_editor(self, app, editors):
        app.copy()
        app.active_editor = editors[1]
        app.paste()

        assert editors[1].get_text() == "Smart Building Ltd."
        assert len(app.history) == 1

    def test_records_iff_execute_returns_true(self, app, editors):
        class NoisyCommand(UICommand):
            def __init__(self, app, editor, result):
                super().__init__(app, editor)
                self.result = result

            def execute(self):
                return self.result

        app.execute_command(NoisyCommand(app, editors[0], False))
        app.execute_command(NoisyCommand(app, editors[0], True))
        app.execute_command(NoisyCommand(app, editors[0], False))

        assert len(app.history) == 1


class TestCommandHistory:
    """Test cases for the history stack."""

    def test_push_pop_order(self, app, editors):
        history = CommandHistory()
        first = CutCommand(app, editors[0])
        second = PasteCommand(app, editors[1])

        history.push(first)
        history.push(second)

        assert list(history) == [first, second]
        assert history.peek() is second
        assert history.pop() is second
        assert history.pop() is first
        assert history.pop() is None

    def test_repr_lists_command_names(self, app, editors):
        history = CommandHistory()
        history.push(CutCommand(app, editors[0]))

        assert repr(history) == "CommandHistory([CutCommand])"
