"""Declarative session models

A session file describes one tmux session:

    name: demo
    directory: ~/src/demo
    windows:
      - name: editor
        panes:
          - command: vim
            focus: true
          - directory: ~/src/demo/tests
      - name: shell

Missing ``windows`` means one default window; missing ``panes`` means one
default pane. Unknown keys are rejected at the session level and ignored
in windows and panes.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Pane(BaseModel):
    """A pane: optional start directory, optional startup command, focus flag."""

    model_config = ConfigDict(frozen=True)

    focus: bool = False
    directory: Path | None = None
    command: str | None = None


def default_panes() -> list[Pane]:
    return [Pane()]


def _none_items_to_defaults(value: Any) -> Any:
    # "- " entries in YAML come through as None
    if isinstance(value, list):
        return [{} if item is None else item for item in value]
    return value


class Window(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    directory: Path | None = None
    panes: list[Pane] = Field(default_factory=default_panes)

    @field_validator("panes", mode="before")
    @classmethod
    def _normalize_panes(cls, value: Any) -> Any:
        if value is None:
            return default_panes()
        return _none_items_to_defaults(value)


def default_windows() -> list[Window]:
    return [Window()]


class Session(BaseModel):
    """Top-level session. ``name`` is used verbatim as the tmux session name."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    directory: Path | None = None
    windows: list[Window] = Field(default_factory=default_windows)

    @field_validator("windows", mode="before")
    @classmethod
    def _normalize_windows(cls, value: Any) -> Any:
        if value is None:
            return default_windows()
        return _none_items_to_defaults(value)
