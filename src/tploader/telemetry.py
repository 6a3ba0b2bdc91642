"""Telemetry - logging and metrics entry points

Log format: [module] msg
Metric examples: muxer.ops{op=new_pane}, muxer.ops_failed{op=send_keys}
"""

import logging

_LOG_FORMAT = "[%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a module logger.

    Args:
        name: Module name (usually ``__name__``)
    """
    return logging.getLogger(name)


def setup_logging(level: str | int = "WARNING") -> None:
    """Configure the root logger to write to stderr.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(format=_LOG_FORMAT)
    logging.getLogger().setLevel(level)


class Metrics:
    """In-memory counters.

    Keys are built from the metric name plus sorted labels, e.g.
    ``muxer.ops{op=new_pane}``.
    """

    def __init__(self):
        self._counters: dict[str, int] = {}

    def inc(self, name: str, labels: dict[str, str] | None = None, value: int = 1) -> None:
        """Increment a counter.

        Args:
            name: Metric name (e.g. "muxer.ops")
            labels: Optional labels (e.g. {"op": "new_pane"})
            value: Increment, default 1
        """
        key = self._make_key(name, labels)
        self._counters[key] = self._counters.get(key, 0) + value

    def get_counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        key = self._make_key(name, labels)
        return self._counters.get(key, 0)

    def reset(self) -> None:
        """Drop all recorded values (used by tests)."""
        self._counters.clear()

    def _make_key(self, name: str, labels: dict[str, str] | None) -> str:
        if not labels:
            return name
        label_str = ",".join(f"{k}={v}" for k, v in sorted(labels.items()))
        return f"{name}{{{label_str}}}"

    def get_all_counters(self) -> dict[str, int]:
        return dict(self._counters)


# Global metrics instance
metrics = Metrics()
