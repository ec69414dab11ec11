from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Document:
    path: Path | None
    text: str
    modified: bool = False


@dataclass(frozen=True)
class Snapshot:
    """Editor content captured at one instant."""

    content: str


def capture(content: str) -> Snapshot:
    return Snapshot(content)
