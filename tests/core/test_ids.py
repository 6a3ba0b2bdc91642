"""Tests for core.ids - tmux target identifiers"""

from tploader.core.ids import PaneId, SessionId, WindowId


class TestSessionId:
    """Test SessionId"""

    def test_name_used_verbatim(self):
        """Any string is kept as is"""
        assert str(SessionId("my project")) == "my project"
        assert SessionId("a.b:c").id == "a.b:c"

    def test_structural_equality(self):
        assert SessionId("demo") == SessionId("demo")
        assert SessionId("demo") != SessionId("other")


class TestWindowId:
    """Test WindowId composition"""

    def test_renders_session_colon_index(self):
        window = WindowId(SessionId("demo"), 1)
        assert str(window) == "demo:1"

    def test_reproducible(self):
        """Same session and index always give the same identifier"""
        assert WindowId(SessionId("demo"), 3) == WindowId(SessionId("demo"), 3)
        assert WindowId(SessionId("demo"), 3).id == WindowId(SessionId("demo"), 3).id

    def test_distinct_positions_distinct_ids(self):
        session = SessionId("demo")
        ids = {WindowId(session, index).id for index in range(20)}
        assert len(ids) == 20

    def test_usable_as_dict_key(self):
        window = WindowId(SessionId("demo"), 0)
        assert {window: "x"}[WindowId(SessionId("demo"), 0)] == "x"


class TestPaneId:
    """Test PaneId composition and parent accessors"""

    def test_renders_window_dot_index(self):
        pane = PaneId(WindowId(SessionId("demo"), 2), 1)
        assert str(pane) == "demo:2.1"

    def test_walks_back_to_window_and_session(self):
        window = WindowId(SessionId("demo"), 2)
        pane = PaneId(window, 1)
        assert pane.window_id == window
        assert pane.session_id == SessionId("demo")
        assert pane.window_id.id == "demo:2"

    def test_distinct_positions_distinct_ids(self):
        window = WindowId(SessionId("demo"), 0)
        ids = {PaneId(window, index).id for index in range(20)}
        assert len(ids) == 20

    def test_same_pane_index_in_different_windows_differs(self):
        session = SessionId("demo")
        assert PaneId(WindowId(session, 0), 0) != PaneId(WindowId(session, 1), 0)
