"""Runtime settings for layerconf itself.

This module provides the LayerconfSettings class and settings singleton.
These settings govern the library (logging, script sources, file encoding);
they are not the application configuration that layerconf merges.

Settings are read from ``LAYERCONF_*`` environment variables only. A .env
file is read when one is passed to ``load_settings()`` explicitly, and its
values never reach ``os.environ``.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from layerconf.settings.validators import (
    resolve_path,
    validate_encoding,
    validate_log_format,
    validate_log_level,
)
from layerconf.telemetry import SETTINGS_LOADED, get_logger

log = get_logger(__name__)


class LayerconfSettings(BaseSettings):
    """Library settings.

    Loads values from environment variables (``LAYERCONF_`` prefix) and
    defaults. Validates all values using Pydantic.
    """

    model_config = SettingsConfigDict(
        env_prefix="LAYERCONF_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Telemetry (applied by configure_logging)
    log_level: str = Field(
        default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_format: str = Field(default="console", description="Console log format (json or console)")
    log_dir: Path | None = Field(
        default=None, description="Directory for rotating JSON logs (disabled when unset)"
    )

    # Sources
    allow_script_sources: bool = Field(
        default=True,
        description=(
            "Allow .py configuration sources. Script sources are executed with full "
            "host-process privilege; disable when sources are not trusted."
        ),
    )
    file_encoding: str = Field(default="utf-8", description="Encoding used to read file sources")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        return validate_log_level(v)

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        return validate_log_format(v)

    @field_validator("file_encoding")
    @classmethod
    def validate_file_encoding(cls, v: str) -> str:
        """Validate file encoding."""
        return validate_encoding(v)

    @field_validator("log_dir", mode="before")
    @classmethod
    def resolve_log_dir(cls, v: Path | str | None) -> Path | None:
        """Resolve relative paths to absolute."""
        return resolve_path(v)


_settings: LayerconfSettings | None = None


def load_settings(env_file: Path | str | None = None) -> LayerconfSettings:
    """Load and validate library settings.

    Args:
        env_file: Optional .env file to read ``LAYERCONF_*`` values from.
            Process environment variables take precedence over it. The
            file's values are not exported to ``os.environ``.

    Returns:
        Validated LayerconfSettings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    try:
        settings = LayerconfSettings(_env_file=env_file)
    except Exception as e:
        log.error("settings_load_failed", error=str(e), error_type=type(e).__name__)
        raise

    log.debug(
        SETTINGS_LOADED,
        log_level=settings.log_level,
        allow_script_sources=settings.allow_script_sources,
    )
    return settings


def get_settings() -> LayerconfSettings:
    """Get the library settings singleton.

    Returns:
        LayerconfSettings instance (singleton pattern).
    """
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
