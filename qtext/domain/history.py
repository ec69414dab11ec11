from __future__ import annotations

from collections import deque

from qtext.domain.errors import EmptyHistory
from qtext.domain.models import Snapshot


class History:
    """
    LIFO stack of snapshots backing undo.

    Unbounded by default. With ``max_depth > 0`` the oldest snapshot is dropped
    once the stack is full, so only the newest ``max_depth`` entries survive.
    """

    def __init__(self, max_depth: int = 0) -> None:
        if max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        self._max_depth = max_depth
        self._stack: deque[Snapshot] = deque(maxlen=max_depth or None)

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def push(self, snapshot: Snapshot) -> None:
        self._stack.append(snapshot)

    def pop(self) -> Snapshot:
        try:
            return self._stack.pop()
        except IndexError:
            raise EmptyHistory("Nothing to undo") from None

    def peek(self) -> Snapshot | None:
        return self._stack[-1] if self._stack else None

    def clear(self) -> None:
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)

    def __bool__(self) -> bool:
        return bool(self._stack)
