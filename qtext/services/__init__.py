"""Concrete service implementations and file format strategies."""

from .file_service import FileService
from .settings_service import SettingsService

__all__ = ["FileService", "SettingsService"]
