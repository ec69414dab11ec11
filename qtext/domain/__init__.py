"""Domain layer: interfaces, errors, undo history and simple models (dataclasses)."""

from .errors import EditorError, EmptyHistory, EmptyPath, IoFailure, ParseFailure, UnsupportedFormat
from .history import History
from .interfaces import (
    FileFormatKind,
    IConfigService,
    IFileFormat,
    IFileService,
    IFormatRegistry,
    ISettingsService,
)
from .models import Document, Snapshot, capture

__all__ = [
    "EditorError",
    "EmptyHistory",
    "EmptyPath",
    "IoFailure",
    "ParseFailure",
    "UnsupportedFormat",
    "History",
    "FileFormatKind",
    "IConfigService",
    "IFileFormat",
    "IFileService",
    "IFormatRegistry",
    "ISettingsService",
    "Document",
    "Snapshot",
    "capture",
]
