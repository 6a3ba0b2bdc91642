"""tmux target identifiers

Identifiers are composed from their parent plus a numeric position and
render to tmux target syntax:

- session:  "<name>"                 e.g. "demo"
- window:   "<session>:<index>"      e.g. "demo:1"
- pane:     "<window>.<index>"       e.g. "demo:1.0"

Indices are absolute tmux indices, i.e. already offset by the server's
base-index / pane-base-index.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionId:
    """Session identifier. The name is used verbatim; tmux decides legality."""

    name: str

    @property
    def id(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True)
class WindowId:
    """Window identifier within a session."""

    session_id: SessionId
    index: int

    @property
    def id(self) -> str:
        return f"{self.session_id}:{self.index}"

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True)
class PaneId:
    """Pane identifier within a window.

    Carries its owning window (and through it the session) so a pane can be
    targeted after the window it belongs to is no longer in scope.
    """

    window_id: WindowId
    index: int

    @property
    def session_id(self) -> SessionId:
        return self.window_id.session_id

    @property
    def id(self) -> str:
        return f"{self.window_id}.{self.index}"

    def __str__(self) -> str:
        return self.id
