"""Tmux client for subprocess-based tmux interaction."""

import logging
import os
import subprocess

from tploader import config
from tploader.adapters.base import MuxerClient
from tploader.core.ids import PaneId, SessionId, WindowId
from tploader.errors import OptionNotFoundError

logger = logging.getLogger(__name__)


def is_inside_tmux() -> bool:
    """Whether this process runs inside a tmux client ($TMUX is set)."""
    return bool(os.environ.get("TMUX"))


def _exact(session_id: SessionId) -> str:
    # "=name" disables tmux's prefix matching of session names
    return f"={session_id}"


class TmuxClient(MuxerClient):
    """Client for driving tmux via subprocess commands.

    Every method runs one (or, for select_pane, two) tmux commands and
    blocks until they exit. Mutating methods return False on failure after
    logging a warning.
    """

    name: str = "tmux"

    def __init__(
        self,
        socket_path: str | None = None,
        binary: str | None = None,
        inside_tmux: bool | None = None,
    ):
        """Initialize TmuxClient.

        Args:
            socket_path: Optional tmux socket path. If None, uses config.TMUX_SOCKET.
            binary: tmux executable. If None, uses config.TMUX_BIN.
            inside_tmux: Force switch-client (True) or attach-session (False).
                If None, decided from $TMUX at call time.
        """
        self._socket_path = socket_path if socket_path is not None else config.TMUX_SOCKET
        self._binary = binary or config.TMUX_BIN
        self._inside_tmux = inside_tmux

    def _command(self, args: tuple[str, ...]) -> list[str]:
        cmd = [self._binary]
        if self._socket_path:
            cmd.extend(["-S", self._socket_path])
        cmd.extend(args)
        return cmd

    def _exec(self, *args: str, capture: bool = True) -> subprocess.CompletedProcess | None:
        """Execute a tmux command without interpreting its exit status.

        Returns:
            The completed process, or None if tmux could not be started.
        """
        cmd = self._command(args)
        logger.debug(f"[TmuxClient] {' '.join(cmd)}")
        try:
            if capture:
                return subprocess.run(cmd, capture_output=True, text=True)
            return subprocess.run(cmd)
        except OSError as e:
            logger.error(f"tmux subprocess error: {e}")
            return None

    def run(self, *args: str, capture: bool = True) -> str | None:
        """Execute a tmux command.

        Args:
            *args: Command arguments (e.g., "new-session", "-d", "-s", "demo")
            capture: Capture stdout/stderr. Disable for commands that take
                over the terminal (attach-session).

        Returns:
            Command stdout on success ("" when not captured), None on failure.
        """
        result = self._exec(*args, capture=capture)
        if result is None:
            return None

        if result.returncode != 0:
            stderr = (result.stderr or "").strip() if capture else ""
            logger.warning(f"tmux command failed: {' '.join(self._command(args))}: {stderr}")
            return None

        return result.stdout if capture else ""

    def get_option(self, option_name: str) -> str:
        # start-server first: with no server running show-options cannot connect
        output = self.run("start-server", ";", "show-options", "-gv", option_name)
        if output is None or not output.strip():
            raise OptionNotFoundError(option_name)
        return output.strip()

    def set_option(self, option_name: str, option_value: str) -> bool:
        return self.run("set-option", "-g", option_name, option_value) is not None

    def has_session(self, session_id: SessionId) -> bool:
        # Exit status 1 is the normal "no such session" answer, so no warning
        result = self._exec("has-session", "-t", _exact(session_id))
        return result is not None and result.returncode == 0

    def new_session(self, session_id: SessionId, directory: str) -> bool:
        return self.run("new-session", "-d", "-s", session_id.id, "-c", directory) is not None

    def switch_to_session(self, session_id: SessionId) -> bool:
        """Switch the current client, or attach when not inside tmux.

        attach-session inherits the terminal and returns once the user
        detaches.
        """
        inside = self._inside_tmux if self._inside_tmux is not None else is_inside_tmux()
        if inside:
            return self.run("switch-client", "-t", _exact(session_id)) is not None
        return self.run("attach-session", "-t", _exact(session_id), capture=False) is not None

    def new_window(self, session_id: SessionId, directory: str) -> bool:
        # "<session>:" targets the session, tmux picks the next free index
        return self.run("new-window", "-t", f"{session_id}:", "-c", directory) is not None

    def rename_window(self, window_id: WindowId, window_name: str) -> bool:
        return self.run("rename-window", "-t", window_id.id, window_name) is not None

    def new_pane(self, window_id: WindowId, directory: str) -> bool:
        return self.run("split-window", "-t", window_id.id, "-c", directory) is not None

    def select_pane(self, pane_id: PaneId) -> bool:
        """Select the pane's window, then the pane itself."""
        if self.run("select-window", "-t", pane_id.window_id.id) is None:
            return False
        return self.run("select-pane", "-t", pane_id.id) is not None

    def send_keys(self, pane_id: PaneId, keys: str) -> bool:
        return self.run("send-keys", "-t", pane_id.id, keys, "Enter") is not None
