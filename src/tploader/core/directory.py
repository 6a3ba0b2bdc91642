"""Working directory precedence

A pane starts in the first directory set among: pane, window, session.
When none is set the fallback ``config.DEFAULT_DIRECTORY`` (".") is used.
"""

import os

from ..config import DEFAULT_DIRECTORY

PathLike = str | os.PathLike


def resolve_directory(
    session_dir: PathLike | None,
    window_dir: PathLike | None,
    pane_dir: PathLike | None,
) -> PathLike | None:
    """Pick the most specific directory that is set.

    Returns:
        pane_dir, else window_dir, else session_dir, else None
    """
    if pane_dir is not None:
        return pane_dir
    if window_dir is not None:
        return window_dir
    return session_dir


def directory_to_string(directory: PathLike | None) -> str:
    """Render a resolved directory for the backend, applying the fallback."""
    if directory is None:
        return DEFAULT_DIRECTORY
    return os.fspath(directory)


def effective_directory(
    session_dir: PathLike | None,
    window_dir: PathLike | None,
    pane_dir: PathLike | None,
) -> str:
    """resolve_directory + directory_to_string."""
    return directory_to_string(resolve_directory(session_dir, window_dir, pane_dir))
