"""Multiplexer client interface

Defines the operations the reconciler issues against a terminal
multiplexer. tmux is the only backend; tests substitute a recording double.

Design:
1. Minimal surface: only what reconciliation needs
2. Synchronous: each call blocks until the backend has finished
3. Fire-and-forget mutations: failures are reported as ``False``, never raised
"""

from abc import ABC, abstractmethod

from ..core.ids import PaneId, SessionId, WindowId


class MuxerClient(ABC):
    """Multiplexer client interface.

    Usage:
        client = TmuxClient()
        if not client.has_session(SessionId("demo")):
            client.new_session(SessionId("demo"), "~/src/demo")
        client.switch_to_session(SessionId("demo"))
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name (e.g. "tmux")"""
        pass

    # Options

    @abstractmethod
    def get_option(self, option_name: str) -> str:
        """Read a global server option.

        Args:
            option_name: Option name (e.g. "base-index")

        Returns:
            The option value as reported by the backend

        Raises:
            OptionNotFoundError: The option does not exist or has no value
        """
        pass

    @abstractmethod
    def set_option(self, option_name: str, option_value: str) -> bool:
        """Set a global server option."""
        pass

    # Sessions

    @abstractmethod
    def has_session(self, session_id: SessionId) -> bool:
        """Whether a session with exactly this name exists."""
        pass

    @abstractmethod
    def new_session(self, session_id: SessionId, directory: str) -> bool:
        """Create a detached session whose first pane starts in ``directory``.

        Returns:
            True on success
        """
        pass

    @abstractmethod
    def switch_to_session(self, session_id: SessionId) -> bool:
        """Attach the invoking terminal to the session."""
        pass

    # Windows

    @abstractmethod
    def new_window(self, session_id: SessionId, directory: str) -> bool:
        """Append a window to the session.

        Args:
            session_id: Owning session
            directory: Start directory of the window's first pane
        """
        pass

    @abstractmethod
    def rename_window(self, window_id: WindowId, window_name: str) -> bool:
        pass

    # Panes

    @abstractmethod
    def new_pane(self, window_id: WindowId, directory: str) -> bool:
        """Split the window, starting the new pane in ``directory``."""
        pass

    @abstractmethod
    def select_pane(self, pane_id: PaneId) -> bool:
        """Make the pane (and its window) active."""
        pass

    @abstractmethod
    def send_keys(self, pane_id: PaneId, keys: str) -> bool:
        """Type ``keys`` into the pane followed by Enter."""
        pass
