from __future__ import annotations

from pathlib import Path

import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtTest import QTest
from PyQt6.QtWidgets import QPlainTextEdit

from qtext.domain.interfaces import FileFormatKind
from qtext.services.formats import FormatRegistryInst, filter_entry, open_filter
from qtext.services.settings_service import SettingsService
from qtext.services.ui.main_window import MainWindow
from qtext.services.ui.presenters import FilePresenter, IFileView
from qtext.utils.constants import DEFAULT_SAVE_SUFFIX

OPEN_FILTER = (
    "All Acceptable Documents (*.txt *.xml);;Text Documents (*.txt);;XML Documents (*.xml)"
)
SAVE_FILTER = "Text Documents (*.txt)"

# ------------------------------
# Fakes & helpers
# ------------------------------


class FakeDialogs:
    def __init__(self) -> None:
        self.open_result: Path | None = None
        self.save_result: Path | None = None
        self.calls: list[tuple] = []

    def get_open_file(self, parent, caption, start_dir, filter_str):
        self.calls.append(("open", start_dir, filter_str))
        return self.open_result

    def get_save_file(self, parent, caption, start_path, filter_str, default_suffix=""):
        self.calls.append(("save", start_path, filter_str, default_suffix))
        return self.save_result


class FakeMessages:
    def __init__(self) -> None:
        self.shown: list[tuple[str, str, str]] = []

    def info(self, parent, title, text):
        self.shown.append(("info", title, text))

    def error(self, parent, title, text):
        self.shown.append(("error", title, text))


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def window(
    qapp, settings_service: SettingsService, dialogs, messages, formats: FormatRegistryInst
) -> MainWindow:
    w = MainWindow(
        settings=settings_service,
        dialogs=dialogs,
        messages=messages,
        open_filter=open_filter(formats),
        save_filter=filter_entry(formats.get(FileFormatKind.PLAIN_TEXT)),
        app_title="Test",
    )
    w.attach_presenter(FilePresenter(view=w, formats=formats))
    return w


# ------------------------------
# Core window behavior tests
# ------------------------------


def test_window_initial_state(window: MainWindow):
    assert isinstance(window, IFileView)
    assert window.file_path == ""
    assert window.content == ""
    assert window.file_name_label.text() == "Untitled"
    assert window.editor.isUndoRedoEnabled() is False


def test_open_dialog_loads_file(tmp_path: Path, window: MainWindow, dialogs, settings_service):
    src = tmp_path / "a.txt"
    src.write_text("Hello", encoding="utf-8")
    dialogs.open_result = src

    window.act_open.trigger()

    assert dialogs.calls[0][2] == OPEN_FILTER
    assert window.content == "Hello"
    assert window.file_path == str(src)
    assert window.file_name_label.text() == "a.txt"
    assert settings_service.get_last_dir() == str(tmp_path)


def test_open_dialog_cancel_does_nothing(window: MainWindow, dialogs, messages):
    window.content = "keep"
    dialogs.open_result = None
    window.act_open.trigger()
    assert window.content == "keep"
    assert messages.shown == []


def test_open_malformed_xml_shows_single_error(tmp_path: Path, window: MainWindow, messages):
    bad = tmp_path / "bad.xml"
    bad.write_text("<a><b></a>", encoding="utf-8")
    window.content = "before"

    window.open_path(bad)

    errors = [m for m in messages.shown if m[0] == "error"]
    assert len(errors) == 1
    assert window.content == "before"


def test_save_without_path_falls_back_to_save_as(
    tmp_path: Path, window: MainWindow, dialogs, messages
):
    dest = tmp_path / "new.txt"
    dialogs.save_result = dest
    window.content = "typed"

    window.act_save.trigger()

    assert dialogs.calls[-1] == ("save", None, SAVE_FILTER, DEFAULT_SAVE_SUFFIX)
    assert dest.read_text(encoding="utf-8") == "typed"
    assert window.file_path == str(dest)
    assert ("info", "Saving", "File saved successfully!") in messages.shown


def test_save_with_path_writes_directly(tmp_path: Path, window: MainWindow, dialogs):
    dest = tmp_path / "doc.txt"
    dest.write_text("old", encoding="utf-8")
    window.open_path(dest)
    window.content = "new"

    window.act_save.trigger()

    assert dest.read_text(encoding="utf-8") == "new"
    assert all(c[0] != "save" for c in dialogs.calls)


def test_keystrokes_snapshot_and_undo(window: MainWindow):
    QTest.keyClick(window.editor, Qt.Key.Key_A)
    QTest.keyClick(window.editor, Qt.Key.Key_B)
    assert window.content == "ab"

    window.act_undo.trigger()
    assert window.content == "a"
    window.act_undo.trigger()
    assert window.content == ""
    window.act_undo.trigger()
    assert window.content == ""


def test_keystroke_marks_window_modified(window: MainWindow):
    assert window.isWindowModified() is False
    QTest.keyClick(window.editor, Qt.Key.Key_X)
    assert window.isWindowModified() is True


def test_wrap_setting_applied(qapp, settings_service, dialogs, messages):
    w = MainWindow(
        settings=settings_service,
        dialogs=dialogs,
        messages=messages,
        open_filter=OPEN_FILTER,
        save_filter=SAVE_FILTER,
        wrap_lines=False,
    )
    assert w.editor.lineWrapMode() == QPlainTextEdit.LineWrapMode.NoWrap


def test_close_persists_geometry(window: MainWindow, settings_service, qapp):
    window.show()
    qapp.processEvents()
    window.close()
    qapp.processEvents()
    assert settings_service.get_geometry() is not None


def test_ctrl_z_shortcut_undoes_typed_characters(window: MainWindow):
    QTest.keyClick(window.editor, Qt.Key.Key_A)
    QTest.keyClick(window.editor, Qt.Key.Key_B)
    assert window.content == "ab"

    QTest.keyClick(window.editor, Qt.Key.Key_Z, Qt.KeyboardModifier.ControlModifier)
    assert window.content == "a"
    QTest.keyClick(window.editor, Qt.Key.Key_Z, Qt.KeyboardModifier.ControlModifier)
    assert window.content == ""
    QTest.keyClick(window.editor, Qt.Key.Key_Z, Qt.KeyboardModifier.ControlModifier)
    assert window.content == ""


def test_bare_modifier_press_records_no_snapshot(window: MainWindow):
    QTest.keyClick(window.editor, Qt.Key.Key_A)
    depth = len(window.presenter.history)

    QTest.keyClick(window.editor, Qt.Key.Key_Control)
    QTest.keyClick(window.editor, Qt.Key.Key_Shift)

    assert len(window.presenter.history) == depth
