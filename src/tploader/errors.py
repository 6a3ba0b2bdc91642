"""Exception types raised by tploader."""


class TploaderError(Exception):
    """Base class for all tploader errors."""


class MuxerError(TploaderError):
    """Errors raised while reconciling a session against the backend."""


class BaseIdsError(MuxerError):
    """The base-index options could not be read or parsed."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"unable to setup base ids: {detail}")


class OptionNotFoundError(MuxerError):
    """A backend option does not exist (or has no value)."""

    def __init__(self, option_name: str):
        self.option_name = option_name
        super().__init__(f"option `{option_name}` not found")


class ConfigError(TploaderError):
    """Errors raised while reading or writing session files."""


class UnableToLoadError(ConfigError):
    """A session file could not be read or written."""

    def __init__(self, reason: OSError | str):
        self.reason = reason
        super().__init__(f"unable to load: {reason}")


class UnableToParseConfigError(ConfigError):
    """A session file is not valid YAML or does not match the schema."""

    def __init__(self, reason: Exception | str):
        self.reason = reason
        super().__init__(f"parser error: {reason}")


class InvalidSessionDirectoryError(ConfigError):
    """Neither the store override nor $HOME is available."""

    def __init__(self):
        super().__init__("invalid session directory")
