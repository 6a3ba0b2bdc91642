"""Core module - identifiers and directory resolution"""

from .directory import directory_to_string, effective_directory, resolve_directory
from .ids import PaneId, SessionId, WindowId

__all__ = [
    "SessionId",
    "WindowId",
    "PaneId",
    "resolve_directory",
    "directory_to_string",
    "effective_directory",
]
