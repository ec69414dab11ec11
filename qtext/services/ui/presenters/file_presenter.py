from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Protocol, runtime_checkable

from qtext.domain.errors import EditorError, EmptyHistory
from qtext.domain.history import History
from qtext.domain.interfaces import IFormatRegistry
from qtext.domain.models import Document, capture

logger = logging.getLogger(__name__)

SAVED_TITLE = "Saving"
SAVED_MESSAGE = "File saved successfully!"


class ISignal(Protocol):
    """Anything with a Qt-style ``connect``; bound pyqtSignals satisfy this."""

    def connect(self, slot: Callable[..., Any]) -> Any: ...


@runtime_checkable
class IFileView(Protocol):
    """Passive view surface the presenter drives (implemented by the Qt MainWindow)."""

    file_path: str
    content: str

    open_requested: ISignal
    save_requested: ISignal
    edit_started: ISignal
    undo_requested: ISignal

    def show_error(self, message: str) -> None: ...
    def show_info(self, title: str, message: str) -> None: ...
    def set_file_name(self, name: str) -> None: ...
    def set_modified(self, modified: bool) -> None: ...


class FilePresenter:
    """
    Mediates between the view and the file formats, and owns the undo history.

    Every failure from format resolution or from a read/write is caught here and
    shown exactly once through ``view.show_error``. Nothing is re-raised.
    """

    def __init__(
        self,
        view: IFileView,
        formats: IFormatRegistry,
        history: History | None = None,
    ) -> None:
        self.view = view
        self.formats = formats
        self.history = history if history is not None else History()
        self.document = Document(path=None, text=view.content, modified=False)

        view.open_requested.connect(self.open_file)
        view.save_requested.connect(self.save_file)
        view.edit_started.connect(self.record_edit)
        view.undo_requested.connect(self.undo)

    # ---------- File flows ----------

    def open_file(self) -> bool:
        path_str = self.view.file_path
        try:
            fmt = self.formats.for_path(path_str)
            text = fmt.read(Path(path_str))
        except EditorError as e:
            self._fail("open", path_str, e)
            return False

        path = Path(path_str)
        self.view.content = text
        self.history.clear()
        self.document = Document(path=path, text=text, modified=False)
        self.view.set_file_name(path.name)
        self.view.set_modified(False)
        logger.info("Opened %s (%s)", path, fmt.kind.name)
        return True

    def save_file(self) -> bool:
        path_str = self.view.file_path
        text = self.view.content
        try:
            fmt = self.formats.for_path(path_str)
            fmt.write(Path(path_str), text)
        except EditorError as e:
            self._fail("save", path_str, e)
            return False

        path = Path(path_str)
        # saving commits the text; earlier undo points are forfeited
        self.history.clear()
        self.document = Document(path=path, text=text, modified=False)
        self.view.set_file_name(path.name)
        self.view.set_modified(False)
        logger.info("Saved %s (%s)", path, fmt.kind.name)
        self.view.show_info(SAVED_TITLE, SAVED_MESSAGE)
        return True

    # ---------- Undo ----------

    def record_edit(self) -> None:
        """Capture the pre-edit content. Called before every keystroke lands."""
        self.history.push(capture(self.view.content))
        if not self.document.modified:
            self.document.modified = True
            self.view.set_modified(True)

    def undo(self) -> bool:
        try:
            snapshot = self.history.pop()
        except EmptyHistory:
            logger.debug("Undo requested with empty history")
            return False
        self.view.content = snapshot.content
        self.document.modified = True
        self.view.set_modified(True)
        return True

    # ---------- Helpers ----------

    def _fail(self, action: str, path_str: str, error: EditorError) -> None:
        logger.warning("Failed to %s %r: %s", action, path_str, error)
        # keep the view pointing at the last file that was actually opened/saved
        self.view.file_path = str(self.document.path) if self.document.path else ""
        self.view.show_error(str(error))
