from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from qtext.domain.errors import EmptyPath, UnsupportedFormat
from qtext.domain.interfaces import FileFormatKind, IFileFormat, IFormatRegistry
from qtext.utils.constants import ALL_DOCUMENTS_LABEL

_BY_EXTENSION = {kind.value: kind for kind in FileFormatKind}


def _extension(path: str) -> str:
    p = Path(path)
    if p.suffix:
        return p.suffix
    # pathlib treats ".txt" as a stem; the name itself is then the extension
    if p.name.startswith(".") and p.name.count(".") == 1:
        return p.name
    return ""


def resolve_format(path: str | Path | None) -> FileFormatKind:
    """
    Map a file path to its format by extension (case-insensitive).

    Raises EmptyPath for a missing/empty path and UnsupportedFormat for
    any extension other than .txt / .xml. Never touches the filesystem.
    """
    if path is None or not str(path).strip():
        raise EmptyPath()
    ext = _extension(str(path)).lower()
    try:
        return _BY_EXTENSION[ext]
    except KeyError:
        raise UnsupportedFormat(ext) from None


def filter_entry(fmt: IFileFormat) -> str:
    """Qt file-dialog filter for one format, e.g. ``Text Documents (*.txt)``."""
    return f"{fmt.label} (*{fmt.kind.value})"


def open_filter(formats: IFormatRegistry) -> str:
    """Combined "all acceptable" entry first, then one entry per registered format."""
    fmts = formats.all()
    patterns = " ".join(f"*{f.kind.value}" for f in fmts)
    entries = [f"{ALL_DOCUMENTS_LABEL} ({patterns})"]
    entries.extend(filter_entry(f) for f in fmts)
    return ";;".join(entries)


@dataclass
class FormatRegistryInst(IFormatRegistry):
    """
    Instance-based table of format capabilities keyed by FileFormatKind.
    Owned by the DI container; no process-wide "current format".
    """

    _reg: dict[FileFormatKind, IFileFormat] = field(default_factory=dict)

    def register(self, fmt: IFileFormat) -> None:
        self._reg[fmt.kind] = fmt

    def get(self, kind: FileFormatKind) -> IFileFormat:
        try:
            return self._reg[kind]
        except KeyError:
            raise UnsupportedFormat(kind.value) from None

    def all(self) -> list[IFileFormat]:
        return list(self._reg.values())

    def for_path(self, path: str | Path | None) -> IFileFormat:
        return self.get(resolve_format(path))
