# qtext/services/config/ini_config_service.py
from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir

from qtext.domain.interfaces import IConfigService
from qtext.utils.constants import DEFAULT_HISTORY_DEPTH, DEFAULT_LOG_LEVEL

logger = logging.getLogger(__name__)


class IniConfigService(IConfigService):
    r"""
    INI-backed configuration reader.

    Load order (first hit wins):
      1. Explicit path provided at construction
      2. User config dir (e.g., ~/.config/QuickText/config.ini or %APPDATA%\QuickText\config.ini)
      3. Project default at <repo>/config/config.ini  (optional)

    Recognised keys:
      [history]  max_depth   (0 = unbounded undo stack)
      [logging]  level       (DEBUG, INFO, WARNING, ...)
      [editor]   wrap        (bool)
    """

    DEFAULT_APP_DIR = "QuickText"
    DEFAULT_FILE = "config.ini"

    def __init__(self, explicit_path: Optional[Path] = None, project_root: Optional[Path] = None):
        self._parser = configparser.ConfigParser()
        self._loaded_from: Optional[Path] = None

        candidates: list[Path] = []
        if explicit_path:
            candidates.append(explicit_path)
        candidates.append(Path(user_config_dir(self.DEFAULT_APP_DIR)) / self.DEFAULT_FILE)
        if project_root:
            candidates.append(project_root / "config" / self.DEFAULT_FILE)

        for path in candidates:
            if not path.exists():
                continue
            try:
                with path.open("r", encoding="utf-8") as fh:
                    self._parser.read_file(fh)
            except (OSError, configparser.Error) as e:
                # A broken config file must not keep the editor from starting.
                logger.warning("Ignoring unreadable config %s: %s", path, e)
                self._parser = configparser.ConfigParser()
                continue
            self._loaded_from = path
            break

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        if section not in self._parser:
            return default
        return self._parser[section].get(key, default)

    def get_int(self, section: str, key: str, default: Optional[int] = None) -> Optional[int]:
        val = self.get(section, key, None)
        if val is None:
            return default
        try:
            return int(val.strip())
        except ValueError:
            return default

    def get_bool(self, section: str, key: str, default: Optional[bool] = None) -> Optional[bool]:
        val = self.get(section, key, None)
        if val is None:
            return default
        truth = {"1", "true", "yes", "y", "on"}
        falsy = {"0", "false", "no", "n", "off"}
        s = val.strip().lower()
        if s in truth:
            return True
        if s in falsy:
            return False
        return default

    # ----- Typed accessors -----

    def history_max_depth(self) -> int:
        depth = self.get_int("history", "max_depth", DEFAULT_HISTORY_DEPTH)
        if depth is None or depth < 0:
            return DEFAULT_HISTORY_DEPTH
        return depth

    def log_level(self) -> str:
        return (self.get("logging", "level", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).strip()

    def wrap_lines(self) -> bool:
        return bool(self.get_bool("editor", "wrap", True))

    @property
    def loaded_from(self) -> Optional[Path]:
        """For diagnostics."""
        return self._loaded_from
