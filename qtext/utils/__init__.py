"""App constants and utilities."""

from .constants import (
    ALL_DOCUMENTS_LABEL,
    APP_NAME,
    APP_ORG,
    DEFAULT_HISTORY_DEPTH,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SAVE_SUFFIX,
    SETTINGS_GEOMETRY,
    SETTINGS_LAST_DIR,
    UNTITLED,
)
from .logs import configure_logging

__all__ = [
    "ALL_DOCUMENTS_LABEL",
    "APP_ORG",
    "APP_NAME",
    "DEFAULT_HISTORY_DEPTH",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_SAVE_SUFFIX",
    "SETTINGS_GEOMETRY",
    "SETTINGS_LAST_DIR",
    "UNTITLED",
    "configure_logging",
]
