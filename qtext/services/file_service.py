from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from qtext.domain.interfaces import IFileService

logger = logging.getLogger(__name__)


class FileService(IFileService):
    """Verbatim UTF-8 reads and atomic writes for text files."""

    def read_text(self, path: Path) -> str:
        # bytes + decode keeps line endings untouched; utf-8-sig drops a leading BOM
        data = path.read_bytes()
        logger.debug("Read %d bytes from %s", len(data), path)
        return data.decode("utf-8-sig")

    def write_text_atomic(self, path: Path, text: str) -> None:
        data = text.encode("utf-8")
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        sf.write(data)
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")
        logger.debug("Wrote %d characters to %s", len(text), path)
