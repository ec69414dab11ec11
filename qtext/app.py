from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from qtext.di.container import Container
from qtext.utils.constants import APP_NAME, APP_ORG
from qtext.utils.logs import configure_logging

logger = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the main window.
    """
    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default()
    configure_logging(container.config.log_level())
    if container.config.loaded_from is not None:
        logger.info("Config loaded from %s", container.config.loaded_from)

    # Optional file path to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path, app_title=APP_NAME)
    win.show()

    return app.exec()
