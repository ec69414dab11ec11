from __future__ import annotations

import logging

from qtext.utils.constants import DEFAULT_LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """
    Attach one stream handler to the ``qtext`` logger.
    Unknown level names fall back to WARNING. Safe to call more than once.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            resolved = logging.getLevelName(DEFAULT_LOG_LEVEL)
    elif isinstance(level, int):
        resolved = level
    else:
        resolved = logging.getLevelName(DEFAULT_LOG_LEVEL)

    root = logging.getLogger("qtext")
    root.setLevel(resolved)
    if not any(getattr(h, "_qtext_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._qtext_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)
