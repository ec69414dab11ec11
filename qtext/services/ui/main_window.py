from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QByteArray, QEvent, QObject, Qt, pyqtSignal
from PyQt6.QtGui import QAction, QKeyEvent, QKeySequence
from PyQt6.QtWidgets import (
    QApplication,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QStatusBar,
    QToolBar,
)

from qtext.domain.interfaces import ISettingsService
from qtext.services.ui.ports.dialogs import IFileDialogService
from qtext.services.ui.ports.messages import IMessageService
from qtext.utils.constants import DEFAULT_SAVE_SUFFIX, UNTITLED

# bare modifier presses are not edits
_MODIFIER_KEYS = frozenset(
    k.value
    for k in (Qt.Key.Key_Control, Qt.Key.Key_Shift, Qt.Key.Key_Alt, Qt.Key.Key_Meta, Qt.Key.Key_AltGr)
)


class MainWindow(QMainWindow):
    """
    Thin PyQt window implementing the presenter's IFileView.

    The window only raises signals and exposes ``file_path`` / ``content``;
    reading, writing and undo live in FilePresenter. Qt's own undo stack is
    switched off so the snapshot history is the single undo mechanism.
    """

    open_requested = pyqtSignal()
    save_requested = pyqtSignal()
    edit_started = pyqtSignal()
    undo_requested = pyqtSignal()

    def __init__(
        self,
        settings: ISettingsService,
        dialogs: IFileDialogService,
        messages: IMessageService,
        *,
        open_filter: str,
        save_filter: str,
        wrap_lines: bool = True,
        app_title: str = "QuickText",
    ) -> None:
        super().__init__()
        self._app_title = app_title
        self.resize(900, 650)

        self.settings = settings
        self.dialogs = dialogs
        self.messages = messages
        self.presenter = None
        self._open_filter = open_filter
        self._save_filter = save_filter

        self.file_path: str = ""
        self._file_name = UNTITLED

        # Widgets
        self.editor = QPlainTextEdit(self)
        self.editor.setUndoRedoEnabled(False)
        self.editor.setTabStopDistance(4 * self.editor.fontMetrics().horizontalAdvance(" "))
        self.editor.setLineWrapMode(
            QPlainTextEdit.LineWrapMode.WidgetWidth
            if wrap_lines
            else QPlainTextEdit.LineWrapMode.NoWrap
        )
        self.editor.installEventFilter(self)
        self.setCentralWidget(self.editor)

        self.file_name_label = QLabel(UNTITLED, self)

        # UI
        self._build_actions()
        self._build_toolbar()
        self._build_menu()
        status = QStatusBar(self)
        status.addPermanentWidget(self.file_name_label)
        self.setStatusBar(status)
        self._update_title()

        # Restore UI state
        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))

    # ---------- IFileView ----------
    @property
    def content(self) -> str:
        return self.editor.toPlainText()

    @content.setter
    def content(self, value: str) -> None:
        self.editor.setPlainText(value)

    def show_error(self, message: str) -> None:
        self.messages.error(self, "Error", message)

    def show_info(self, title: str, message: str) -> None:
        self.messages.info(self, title, message)

    def set_file_name(self, name: str) -> None:
        self._file_name = name or UNTITLED
        self.file_name_label.setText(self._file_name)
        self._update_title()

    def set_modified(self, modified: bool) -> None:
        self.setWindowModified(modified)

    def attach_presenter(self, presenter) -> None:
        self.presenter = presenter

    # ---------- UI creation ----------
    def _build_actions(self):
        self.act_open = QAction(
            "Open…",
            self,
            shortcut=QKeySequence.StandardKey.Open,
            triggered=self._open_dialog,
        )
        self.act_save = QAction(
            "Save", self, shortcut=QKeySequence.StandardKey.Save, triggered=self._save
        )
        self.act_save_as = QAction(
            "Save As…",
            self,
            shortcut=QKeySequence.StandardKey.SaveAs,
            triggered=self._save_as,
        )
        self.act_undo = QAction(
            "Undo",
            self,
            shortcut=QKeySequence.StandardKey.Undo,
            triggered=lambda: self.undo_requested.emit(),
        )
        self.act_exit = QAction("&Exit", self, shortcut="Ctrl+Q")
        self.act_exit.setStatusTip("Exit application")
        self.act_exit.triggered.connect(QApplication.instance().quit)

    def _build_toolbar(self):
        tb = QToolBar("Main", self)
        tb.setMovable(False)
        for a in (self.act_open, self.act_save, self.act_save_as):
            tb.addAction(a)
        tb.addSeparator()
        tb.addAction(self.act_undo)
        self.addToolBar(tb)

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_open)
        filem.addSeparator()
        filem.addAction(self.act_save)
        filem.addAction(self.act_save_as)
        filem.addSeparator()
        filem.addAction(self.act_exit)

        editm = m.addMenu("&Edit")
        editm.addAction(self.act_undo)

    # ---------- Actions ----------
    def _open_dialog(self):
        path = self.dialogs.get_open_file(
            self, "Open", self.settings.get_last_dir(), self._open_filter
        )
        if path is None:
            return
        self.open_path(path)

    def open_path(self, path: Path) -> None:
        self.settings.set_last_dir(str(path.parent))
        self.file_path = str(path)
        self.open_requested.emit()

    def _save(self):
        if not self.file_path:
            self._save_as()
            return
        self.save_requested.emit()

    def _save_as(self):
        start = self.file_path or self.settings.get_last_dir()
        path = self.dialogs.get_save_file(
            self, "Save As", start, self._save_filter, DEFAULT_SAVE_SUFFIX
        )
        if path is None:
            return
        self.settings.set_last_dir(str(path.parent))
        self.file_path = str(path)
        self.save_requested.emit()

    # ---------- Events ----------
    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if (
            obj is self.editor
            and event.type() == QEvent.Type.KeyPress
            and isinstance(event, QKeyEvent)
        ):
            if event.matches(QKeySequence.StandardKey.Undo):
                self.undo_requested.emit()
                return True
            if event.key() in _MODIFIER_KEYS:
                return super().eventFilter(obj, event)
            # snapshot before the key reaches the editor
            self.edit_started.emit()
        return super().eventFilter(obj, event)

    def closeEvent(self, event):
        self.settings.set_geometry(bytes(self.saveGeometry()))
        super().closeEvent(event)

    # ---------- Helpers ----------
    def _update_title(self):
        # [*] is replaced by Qt with a marker while windowModified is set
        self.setWindowTitle(f"{self._file_name}[*] — {self._app_title}")
