from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Protocol


class FileFormatKind(Enum):
    """Formats the editor can open, resolved once from the file extension."""

    PLAIN_TEXT = ".txt"
    XML_TEXT = ".xml"


class IFileService(Protocol):
    """Read/write text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_last_dir(self) -> str | None: ...
    def set_last_dir(self, directory: str) -> None: ...


class IConfigService(Protocol):
    """Read-only access to the INI configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...


class IFileFormat(ABC):
    """Format strategy: converts between a file on disk and editor text."""

    kind: FileFormatKind
    label: str  # dialog filter name, e.g. "Text Documents"

    @abstractmethod
    def read(self, path: Path) -> str:
        raise NotImplementedError

    @abstractmethod
    def write(self, path: Path, content: str) -> None:
        raise NotImplementedError


class IFormatRegistry(Protocol):
    def register(self, fmt: IFileFormat) -> None: ...
    def get(self, kind: FileFormatKind) -> IFileFormat: ...
    def all(self) -> list[IFileFormat]: ...
    def for_path(self, path: str | Path | None) -> IFileFormat: ...
