from __future__ import annotations

from pathlib import Path

from qtext.domain.errors import IoFailure
from qtext.domain.interfaces import FileFormatKind, IFileFormat, IFileService


class PlainTextFormat(IFileFormat):
    kind = FileFormatKind.PLAIN_TEXT
    label = "Text Documents"

    def __init__(self, files: IFileService) -> None:
        self._files = files

    def read(self, path: Path) -> str:
        try:
            return self._files.read_text(path)
        except (OSError, UnicodeError) as e:
            raise IoFailure(f"Failed to read {path}: {e}") from e

    def write(self, path: Path, content: str) -> None:
        try:
            self._files.write_text_atomic(path, content)
        except (OSError, UnicodeError) as e:
            raise IoFailure(f"Failed to write {path}: {e}") from e
