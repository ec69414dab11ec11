from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from qtext.domain.errors import IoFailure, ParseFailure
from qtext.domain.interfaces import FileFormatKind, IFileFormat, IFileService
from qtext.services.formats.plain_text import PlainTextFormat


def extract_text(root: ET.Element) -> str:
    """
    Concatenate every text node under ``root`` in document order, trimmed and
    newline-terminated. Whitespace-only nodes are skipped.

    ElementTree stores text nodes as ``element.text`` (before the first child)
    and ``child.tail`` (after each child), so walking text, then each child
    followed by its tail, visits them in the order they appear in the file.
    """
    parts: list[str] = []

    def walk(el: ET.Element) -> None:
        _emit(parts, el.text)
        for child in el:
            walk(child)
            _emit(parts, child.tail)

    walk(root)
    return "".join(parts)


def _emit(parts: list[str], fragment: str | None) -> None:
    if fragment is None:
        return
    trimmed = fragment.strip()
    if trimmed:
        parts.append(trimmed + "\n")


class XmlTextFormat(IFileFormat):
    """
    Reads the text content of an XML document; writes plain text.

    ``write`` stores the flattened text as-is; markup is not rebuilt, so an
    open/save cycle on an .xml path replaces the document with its text.
    """

    kind = FileFormatKind.XML_TEXT
    label = "XML Documents"

    def __init__(self, files: IFileService) -> None:
        self._plain = PlainTextFormat(files)

    def read(self, path: Path) -> str:
        try:
            tree = ET.parse(path)
        except OSError as e:
            raise IoFailure(f"Error reading XML file: {e}") from e
        except (ET.ParseError, LookupError, ValueError) as e:
            # unknown or undecodable declared encodings surface as LookupError / UnicodeError
            raise ParseFailure(f"Error reading XML file: {e}") from e
        return extract_text(tree.getroot())

    def write(self, path: Path, content: str) -> None:
        self._plain.write(path, content)
