"""Pytest configuration and shared test doubles"""

import pytest

from tploader.adapters.base import MuxerClient
from tploader.errors import OptionNotFoundError
from tploader.telemetry import metrics

QUERY_OPS = {"has_session", "get_option"}


class RecordingClient(MuxerClient):
    """MuxerClient double that records every call in order.

    Args:
        existing: Session names reported by has_session
        options: Option values returned by get_option (missing → OptionNotFoundError)
        fail_ops: Operation names that report failure (return False)
    """

    name = "recording"

    def __init__(self, existing=(), options=None, fail_ops=()):
        self.existing = set(existing)
        if options is None:
            options = {"base-index": "0", "pane-base-index": "0"}
        self.options = dict(options)
        self.fail_ops = set(fail_ops)
        self.calls: list[tuple] = []

    def _record(self, op, *args) -> bool:
        self.calls.append((op, *args))
        return op not in self.fail_ops

    @property
    def mutating_calls(self) -> list[tuple]:
        return [call for call in self.calls if call[0] not in QUERY_OPS]

    def ops(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]

    def get_option(self, option_name):
        self.calls.append(("get_option", option_name))
        if option_name not in self.options:
            raise OptionNotFoundError(option_name)
        return self.options[option_name]

    def set_option(self, option_name, option_value):
        return self._record("set_option", option_name, option_value)

    def has_session(self, session_id):
        self.calls.append(("has_session", session_id))
        return session_id.name in self.existing

    def new_session(self, session_id, directory):
        return self._record("new_session", session_id, directory)

    def switch_to_session(self, session_id):
        return self._record("switch_to_session", session_id)

    def new_window(self, session_id, directory):
        return self._record("new_window", session_id, directory)

    def rename_window(self, window_id, window_name):
        return self._record("rename_window", window_id, window_name)

    def new_pane(self, window_id, directory):
        return self._record("new_pane", window_id, directory)

    def select_pane(self, pane_id):
        return self._record("select_pane", pane_id)

    def send_keys(self, pane_id, keys):
        return self._record("send_keys", pane_id, keys)


@pytest.fixture
def make_client():
    """Factory for RecordingClient instances"""
    return RecordingClient


@pytest.fixture(autouse=True)
def reset_metrics():
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def session_store(tmp_path, monkeypatch):
    """Point the session store at a temporary directory"""
    store_dir = tmp_path / "sessions"
    store_dir.mkdir()
    monkeypatch.setenv("TP_SESSIONS_DIR", str(store_dir))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    return store_dir
