"""tmux adapter for tploader."""

from .client import TmuxClient, is_inside_tmux

__all__ = ["TmuxClient", "is_inside_tmux"]
