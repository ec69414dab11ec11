from __future__ import annotations


class EditorError(Exception):
    """Base class for failures the presenter reports back to the user."""


class EmptyPath(EditorError):
    def __init__(self, message: str = "The path is empty (no file was selected).") -> None:
        super().__init__(message)


class UnsupportedFormat(EditorError):
    def __init__(self, extension: str) -> None:
        self.extension = extension
        shown = extension or "(none)"
        super().__init__(f"Unsupported file format: {shown}")


class IoFailure(EditorError):
    """Reading or writing the file on disk failed."""


class ParseFailure(EditorError):
    """The markup document could not be parsed."""


class EmptyHistory(EditorError):
    """Raised by History.pop() when there is nothing to undo."""
