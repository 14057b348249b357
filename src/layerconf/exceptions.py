"""Exception hierarchy for layerconf.

Library users can distinguish between contract violations (using a
configuration before it is usable) and load failures (a source that could
not be read or decoded):

- NotReadyError: `get`/`current` called before the first successful load
- NotInitializedError: the process-wide registry was never initialized
- ConfigLoadError: base class for everything that aborts a load pass
  (UnsupportedFormatError, DecodeError, SourceReadError)

All exceptions inherit from LayerconfError so callers can catch every
library error with a single except clause.

Example:
    >>> from layerconf import Config
    >>> from layerconf.exceptions import ConfigLoadError
    >>> config = Config({"debug": False}, "settings.yaml")
    >>> try:
    ...     await config.load_configs()
    ... except ConfigLoadError as e:
    ...     print(f"Could not load configuration: {e}")
"""

from __future__ import annotations

__all__ = [
    "LayerconfError",
    "NotReadyError",
    "NotInitializedError",
    "ConfigLoadError",
    "UnsupportedFormatError",
    "DecodeError",
    "SourceReadError",
]


class LayerconfError(Exception):
    """Base exception for all layerconf errors."""

    pass


class NotReadyError(LayerconfError, RuntimeError):
    """Raised when configuration is read before its first successful load.

    This is a programming contract violation: await `Config.load_configs()`
    (or `ConfigRegistry.init()`) before calling `get()`.
    """

    pass


class NotInitializedError(LayerconfError, RuntimeError):
    """Raised when the process-wide registry is used before `init()`."""

    pass


class ConfigLoadError(LayerconfError):
    """Base exception for failures that abort a load pass.

    The previously published configuration and readiness are retained
    whenever one of these is raised.

    Attributes:
        source: The source that failed, when known.
    """

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


class UnsupportedFormatError(ConfigLoadError):
    """Raised when a file source has an extension with no registered decoder."""

    pass


class DecodeError(ConfigLoadError):
    """Raised when file content cannot be decoded into a configuration mapping."""

    pass


class SourceReadError(ConfigLoadError):
    """Raised when a file source cannot be read."""

    pass
