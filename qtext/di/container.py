from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QSettings

from qtext.domain.history import History
from qtext.domain.interfaces import FileFormatKind, IFileService, IFormatRegistry, ISettingsService
from qtext.services.config.ini_config_service import IniConfigService
from qtext.services.file_service import FileService
from qtext.services.formats import (
    FormatRegistryInst,
    PlainTextFormat,
    XmlTextFormat,
    filter_entry,
    open_filter,
)
from qtext.services.settings_service import SettingsService
from qtext.services.ui.adapters import QtFileDialogService, QtMessageService
from qtext.services.ui.main_window import MainWindow
from qtext.services.ui.ports.dialogs import IFileDialogService
from qtext.services.ui.ports.messages import IMessageService
from qtext.services.ui.presenters import FilePresenter
from qtext.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Registers the built-in file formats (txt, xml) in its own format table
      - Builds the window and binds a FilePresenter to it
    """

    def __init__(
        self,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        config: IniConfigService | None = None,
        qsettings: QSettings | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
        formats: IFormatRegistry | None = None,
    ) -> None:
        self.config: IniConfigService = config or IniConfigService(
            project_root=Path(__file__).resolve().parents[2]
        )
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

        self.formats: IFormatRegistry = formats or FormatRegistryInst()
        self._ensure_builtin_formats()

    # ---------- Class helpers ----------

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings)

    # ---------- Internals ----------

    def _ensure_builtin_formats(self) -> None:
        registered = {f.kind for f in self.formats.all()}
        for fmt in (PlainTextFormat(self.file_service), XmlTextFormat(self.file_service)):
            if fmt.kind not in registered:
                self.formats.register(fmt)

    # ---------- UI factories ----------

    def build_history(self) -> History:
        return History(max_depth=self.config.history_max_depth())

    def build_presenter(self, view) -> FilePresenter:
        return FilePresenter(view=view, formats=self.formats, history=self.build_history())

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        """Create the Qt MainWindow, attach its presenter and optionally open a start file."""
        window = MainWindow(
            settings=self.settings_service,
            dialogs=self.dialogs,
            messages=self.messages,
            open_filter=open_filter(self.formats),
            save_filter=filter_entry(self.formats.get(FileFormatKind.PLAIN_TEXT)),
            wrap_lines=self.config.wrap_lines(),
            app_title=app_title,
        )
        window.attach_presenter(self.build_presenter(window))

        if start_path is not None:
            window.open_path(start_path)

        return window
