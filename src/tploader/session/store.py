"""Session store

Session files are ``<name>.yaml`` files in the store directory:
``$TP_SESSIONS_DIR`` if set, else ``$HOME/.config/tp``.

The loader is also responsible for tilde expansion, so sessions handed to
the reconciler only carry resolved paths.
"""

import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from .. import config
from ..errors import InvalidSessionDirectoryError, UnableToLoadError, UnableToParseConfigError
from ..telemetry import get_logger
from .models import Pane, Session, Window

logger = get_logger(__name__)


def default_directory() -> Path | None:
    """Store directory, or None when neither override nor $HOME is set."""
    override = os.environ.get(config.SESSIONS_DIR_ENV)
    if override:
        return Path(override)
    home = os.environ.get(config.HOME_ENV)
    if home:
        return Path(home) / config.DEFAULT_SESSIONS_SUBDIR
    return None


def _session_path(directory: Path, name: str) -> Path:
    return directory / f"{name}.{config.SESSION_FILE_EXT}"


def expand_tilde(path: Path | None) -> Path | None:
    """Expand a leading ``~/`` against $HOME. Other paths are returned as is."""
    if path is None:
        return None
    text = os.fspath(path)
    home = os.environ.get(config.HOME_ENV)
    if home and text.startswith("~/"):
        return Path(home) / text[2:]
    return path


def _expand_session(session: Session) -> Session:
    windows = []
    for window in session.windows:
        panes = [
            pane.model_copy(update={"directory": expand_tilde(pane.directory)})
            for pane in window.panes
        ]
        windows.append(
            window.model_copy(update={"directory": expand_tilde(window.directory), "panes": panes})
        )
    return session.model_copy(
        update={"directory": expand_tilde(session.directory), "windows": windows}
    )


def load_from_string(content: str) -> Session:
    """Parse a session from YAML text.

    Raises:
        UnableToParseConfigError: Invalid YAML, not a mapping, or schema mismatch
    """
    try:
        raw = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise UnableToParseConfigError(e) from e

    if not isinstance(raw, dict):
        raise UnableToParseConfigError(f"expected a mapping, got {type(raw).__name__}")

    try:
        session = Session.model_validate(raw)
    except ValidationError as e:
        raise UnableToParseConfigError(e) from e

    return _expand_session(session)


def load_from_name(name: str) -> Session:
    """Load ``<store>/<name>.yaml``.

    Raises:
        InvalidSessionDirectoryError: No store directory could be determined
        UnableToLoadError: The file could not be read
        UnableToParseConfigError: The file content is invalid
    """
    directory = default_directory()
    if directory is None:
        raise InvalidSessionDirectoryError()

    path = _session_path(directory, name)
    try:
        content = path.resolve(strict=True).read_text(encoding="utf-8")
    except OSError as e:
        raise UnableToLoadError(e) from e

    logger.debug(f"[Store] loaded {path}")
    return load_from_string(content)


def list_sessions() -> list[str]:
    """Sorted names of the stored sessions.

    A missing or unreadable store yields an empty list.
    """
    directory = default_directory()
    if directory is None:
        return []

    try:
        entries = list(directory.iterdir())
    except OSError as e:
        logger.debug(f"[Store] cannot read {directory}: {e}")
        return []

    suffix = f".{config.SESSION_FILE_EXT}"
    return sorted(path.stem for path in entries if path.is_file() and path.suffix == suffix)


def starter_session(name: str) -> Session:
    """The session written by :func:`create`."""
    return Session(
        name=name,
        directory=Path(config.DEFAULT_DIRECTORY),
        windows=[
            Window(
                name=config.STARTER_WINDOW_NAME,
                panes=[Pane(focus=True, command=config.STARTER_COMMAND)],
            )
        ],
    )


def create(name: str) -> Path:
    """Write a starter session file and return its path.

    Raises:
        InvalidSessionDirectoryError: No store directory could be determined
        UnableToLoadError: The file exists already or could not be written
    """
    directory = default_directory()
    if directory is None:
        raise InvalidSessionDirectoryError()

    path = _session_path(directory, name)
    data = starter_session(name).model_dump(mode="json", exclude_none=True)
    content = yaml.safe_dump(data, sort_keys=False)

    try:
        directory.mkdir(parents=True, exist_ok=True)
        with open(path, "x", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise UnableToLoadError(e) from e

    logger.info(f"[Store] created {path}")
    return path
