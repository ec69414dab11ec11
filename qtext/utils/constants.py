APP_ORG = "QuickTools"
APP_NAME = "QuickText"

ALL_DOCUMENTS_LABEL = "All Acceptable Documents"
DEFAULT_SAVE_SUFFIX = ".txt"
UNTITLED = "Untitled"

SETTINGS_GEOMETRY = "window/geometry"
SETTINGS_LAST_DIR = "file/last_dir"

# INI config: [history] max_depth = 0 keeps every snapshot
DEFAULT_HISTORY_DEPTH = 0
DEFAULT_LOG_LEVEL = "WARNING"
