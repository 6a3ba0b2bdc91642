"""tploader - a simple tmux project loader"""

from .core.ids import PaneId, SessionId, WindowId
from .errors import BaseIdsError, ConfigError, MuxerError, OptionNotFoundError, TploaderError
from .muxer import Muxer, Output
from .session.models import Pane, Session, Window

__version__ = "0.1.0"

__all__ = [
    "Muxer",
    "Output",
    "Session",
    "Window",
    "Pane",
    "SessionId",
    "WindowId",
    "PaneId",
    "TploaderError",
    "MuxerError",
    "BaseIdsError",
    "OptionNotFoundError",
    "ConfigError",
]
