"""Muxer - builds a declared session in the multiplexer

Flow of ``Muxer.apply``:
1. Session already running → switch to it, nothing else
2. Read base-index / pane-base-index (fatal if missing or not a number)
3. new-session in the first pane's directory
4. Per window: new-window (all but the first), rename, then per pane:
   split (all but the first), send startup command, remember focus
5. Select the focused pane, switch to the session

Mutations are fire-and-forget: a failed backend call is logged and counted
but never stops the build.
"""

from dataclasses import dataclass, field

from . import config
from .adapters.base import MuxerClient
from .core.directory import effective_directory, resolve_directory
from .core.ids import PaneId, SessionId, WindowId
from .errors import BaseIdsError, OptionNotFoundError
from .session.models import Session
from .telemetry import get_logger, metrics

logger = get_logger(__name__)


@dataclass
class Output:
    """Result of one apply call.

    Attributes:
        session_name: Name of the session
        is_new_session: False when an existing session was switched to
        windows: (window index, [pane indices]) per created window, using
            absolute tmux indices
    """

    session_name: str
    is_new_session: bool
    windows: list[tuple[int, list[int]]] = field(default_factory=list)


class Muxer:
    """Reconciles a declared Session against a MuxerClient.

    Base indices are read once per ``apply`` call and are only valid for
    that call; do not share one Muxer between concurrent callers.
    """

    def __init__(self, client: MuxerClient):
        self._client = client
        self.base_window_id = 0
        self.base_pane_id = 0

    def apply(self, session: Session) -> Output:
        """Create the session, or switch to it if it already exists.

        Raises:
            BaseIdsError: base-index options missing or not integers. Raised
                before any mutating call.
        """
        session_id = SessionId(session.name)
        windows: list[tuple[int, list[int]]] = []

        if self._client.has_session(session_id):
            logger.info(f"[Muxer] session {session_id} exists, switching")
            self._track("switch_to_session", self._client.switch_to_session(session_id))
            return Output(session_name=session.name, is_new_session=False, windows=windows)

        self._setup_base_ids()

        first_window = session.windows[0] if session.windows else None
        first_pane = first_window.panes[0] if first_window and first_window.panes else None
        initial_dir = effective_directory(
            session.directory,
            first_window.directory if first_window else None,
            first_pane.directory if first_pane else None,
        )
        logger.info(f"[Muxer] creating session {session_id} in {initial_dir}")
        self._track("new_session", self._client.new_session(session_id, initial_dir))

        focus_pane: PaneId | None = None
        for wid, window in enumerate(session.windows):
            window_dir = resolve_directory(session.directory, window.directory, None)
            if wid > 0:
                window_first_pane = window.panes[0] if window.panes else None
                initial_dir = effective_directory(
                    session.directory,
                    window_dir,
                    window_first_pane.directory if window_first_pane else None,
                )
                self._track("new_window", self._client.new_window(session_id, initial_dir))

            widx = self.base_window_id + wid
            window_id = WindowId(session_id, widx)
            if window.name is not None:
                self._track("rename_window", self._client.rename_window(window_id, window.name))

            panes: list[int] = []
            for pid, pane in enumerate(window.panes):
                pidx = self.base_pane_id + pid
                pane_id = PaneId(window_id, pidx)
                # Last focused pane in traversal order wins
                if pane.focus:
                    if focus_pane is not None:
                        logger.warning(
                            f"[Muxer] several panes marked focus, {pane_id} replaces {focus_pane}"
                        )
                    focus_pane = pane_id

                if pid > 0:
                    pane_dir = effective_directory(session.directory, window_dir, pane.directory)
                    self._track("new_pane", self._client.new_pane(window_id, pane_dir))

                if pane.command is not None:
                    self._track("send_keys", self._client.send_keys(pane_id, pane.command))

                panes.append(pidx)

            windows.append((widx, panes))

        if focus_pane is not None:
            self._track("select_pane", self._client.select_pane(focus_pane))

        self._track("switch_to_session", self._client.switch_to_session(session_id))

        return Output(session_name=session.name, is_new_session=True, windows=windows)

    def _track(self, op: str, ok: bool | None) -> None:
        metrics.inc("muxer.ops", {"op": op})
        if ok is False:
            metrics.inc("muxer.ops_failed", {"op": op})
            logger.warning(f"[Muxer] {op} failed, continuing")

    def _setup_base_ids(self) -> None:
        self.base_window_id = self._get_index(config.BASE_INDEX_OPTION)
        self.base_pane_id = self._get_index(config.PANE_BASE_INDEX_OPTION)
        logger.debug(
            f"[Muxer] base ids: window={self.base_window_id} pane={self.base_pane_id}"
        )

    def _get_index(self, option_name: str) -> int:
        try:
            value = self._client.get_option(option_name)
        except OptionNotFoundError as e:
            raise BaseIdsError(str(e)) from e

        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise BaseIdsError(f"invalid digit found in `{value}` for option `{option_name}`")
        return int(text)
