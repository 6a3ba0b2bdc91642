"""Tests for the tp command line"""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from tploader.cli import app
from tploader.core.ids import SessionId

runner = CliRunner()


@pytest.fixture
def fake_tmux(make_client):
    client = make_client()
    with patch("tploader.cli.TmuxClient", return_value=client):
        yield client


def test_show_help():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for command in ["load", "list", "new"]:
        assert command in result.output


def test_no_arguments_shows_help():
    result = runner.invoke(app, [])

    assert "A simple tmux project loader" in result.output


def test_list(session_store):
    (session_store / "b.yaml").write_text("name: b")
    (session_store / "a.yaml").write_text("name: a")

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["a", "b"]


def test_new(session_store):
    result = runner.invoke(app, ["new", "fresh"])

    assert result.exit_code == 0
    assert (session_store / "fresh.yaml").exists()


def test_new_existing_fails(session_store):
    (session_store / "taken.yaml").write_text("name: taken")

    result = runner.invoke(app, ["new", "taken"])

    assert result.exit_code == 1


def test_load_creates_session(session_store, fake_tmux):
    (session_store / "demo.yaml").write_text(
        "name: demo\nwindows:\n  - panes:\n      - command: echo hi\n      - {}\n"
    )

    result = runner.invoke(app, ["load", "demo"])

    assert result.exit_code == 0
    assert "Created" in result.output
    assert "window 0: panes 0, 1" in result.output
    assert fake_tmux.ops("switch_to_session") == [("switch_to_session", SessionId("demo"))]


def test_load_switches_to_existing(session_store, fake_tmux):
    (session_store / "demo.yaml").write_text("name: demo\n")
    fake_tmux.existing.add("demo")

    result = runner.invoke(app, ["load", "demo"])

    assert result.exit_code == 0
    assert "Switched to session" in result.output
    assert fake_tmux.ops("new_session") == []


def test_load_missing_file(session_store, fake_tmux):
    result = runner.invoke(app, ["load", "missing"])

    assert result.exit_code == 1
    assert fake_tmux.calls == []


def test_load_base_ids_error(session_store, fake_tmux):
    (session_store / "demo.yaml").write_text("name: demo\n")
    fake_tmux.options.clear()

    result = runner.invoke(app, ["load", "demo"])

    assert result.exit_code == 1
    assert fake_tmux.mutating_calls == []


def test_invalid_log_level(session_store):
    result = runner.invoke(app, ["--log-level", "chatty", "list"])

    assert result.exit_code != 0
