"""Multiplexer adapters

- MuxerClient: client interface consumed by the reconciler
- TmuxClient: subprocess-based tmux implementation
"""

from .base import MuxerClient
from .tmux import TmuxClient

__all__ = [
    "MuxerClient",
    "TmuxClient",
]
