"""Custom Pydantic validators for layerconf settings.

This module provides validators for settings fields and custom type
conversions.
"""

from pathlib import Path


def validate_log_level(value: str) -> str:
    """Validate log level is one of the standard levels.

    Args:
        value: Log level string.

    Returns:
        Validated log level.

    Raises:
        ValueError: If log level is not valid.
    """
    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if value.upper() not in valid_levels:
        raise ValueError(f"log_level must be one of {valid_levels}, got {value}")
    return value.upper()


def validate_log_format(value: str) -> str:
    """Validate log format is 'json' or 'console'.

    Args:
        value: Log format string.

    Returns:
        Validated log format.

    Raises:
        ValueError: If log format is not valid.
    """
    valid_formats = {"json", "console"}
    if value.lower() not in valid_formats:
        raise ValueError(f"log_format must be one of {valid_formats}, got {value}")
    return value.lower()


def validate_encoding(value: str) -> str:
    """Validate that a text encoding name is known to Python.

    Args:
        value: Encoding name, e.g. "utf-8".

    Returns:
        Canonical codec name.

    Raises:
        ValueError: If the encoding is unknown.
    """
    import codecs  # noqa: PLC0415

    try:
        return codecs.lookup(value).name
    except LookupError:
        raise ValueError(f"file_encoding is not a known encoding: {value}") from None


def resolve_path(value: Path | str | None) -> Path | None:
    """Resolve relative paths against the current working directory.

    Args:
        value: Path value (string, Path or None).

    Returns:
        Resolved absolute Path, or None when no path was given.
    """
    if value is None or value == "":
        return None
    path = Path(value) if isinstance(value, str) else value
    return path.expanduser().resolve()
