from __future__ import annotations

from .file_presenter import FilePresenter, IFileView

__all__ = ["FilePresenter", "IFileView"]
