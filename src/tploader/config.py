"""tploader configuration

Settings fall into these groups:
- Session store: where session files live and how they are named
- Reconciliation: fallback directory, tmux option names
- tmux driver: binary and socket
- Logging
"""

import os

# === Session store ===
SESSIONS_DIR_ENV = "TP_SESSIONS_DIR"  # overrides the store directory
HOME_ENV = "HOME"
DEFAULT_SESSIONS_SUBDIR = ".config/tp"  # relative to $HOME
SESSION_FILE_EXT = "yaml"

# === Reconciliation ===
DEFAULT_DIRECTORY = "."  # used when no session/window/pane directory is set
BASE_INDEX_OPTION = "base-index"
PANE_BASE_INDEX_OPTION = "pane-base-index"

# === Starter session (tp new) ===
STARTER_WINDOW_NAME = "shell"
STARTER_COMMAND = "echo 'Hello :)'"

# === tmux driver ===
TMUX_BIN = os.environ.get("TP_TMUX_BIN", "tmux")
TMUX_SOCKET = os.environ.get("TP_TMUX_SOCKET") or None

# === Logging ===
LOG_LEVEL = os.environ.get("TP_LOG_LEVEL", "WARNING")
