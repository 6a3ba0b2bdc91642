"""Session files: declarative models and the YAML store"""

from .models import Pane, Session, Window
from .store import create, default_directory, list_sessions, load_from_name, load_from_string

__all__ = [
    "Session",
    "Window",
    "Pane",
    "load_from_name",
    "load_from_string",
    "list_sessions",
    "create",
    "default_directory",
]
