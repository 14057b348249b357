"""Layered configuration for Python applications.

Merge configuration from inline values and JSON, YAML, TOML or Python
files by priority, reload on demand, and read values by path from one
immutable tree.

Example:
    >>> from layerconf import Config
    >>> config = Config({"debug": False}, "defaults.yaml", "production.toml")
    >>> await config.load_configs()
    >>> config.get("database.hosts[0]")
    'db1.internal'
"""

from layerconf.accessor import Config
from layerconf.decoders import DecoderRegistry, FormatDecoder, StrictDecoder, default_decoders
from layerconf.exceptions import (
    ConfigLoadError,
    DecodeError,
    LayerconfError,
    NotInitializedError,
    NotReadyError,
    SourceReadError,
    UnsupportedFormatError,
)
from layerconf.merge import deep_freeze, deep_merge, thaw
from layerconf.registry import ConfigRegistry, RegistryState, current, get_registry, init
from layerconf.sources import SourceList
from layerconf.telemetry import configure_logging

__all__ = [
    "Config",
    "SourceList",
    # Registry
    "ConfigRegistry",
    "RegistryState",
    "init",
    "current",
    "get_registry",
    # Decoders
    "DecoderRegistry",
    "FormatDecoder",
    "StrictDecoder",
    "default_decoders",
    # Logging
    "configure_logging",
    # Tree helpers
    "deep_merge",
    "deep_freeze",
    "thaw",
    # Exceptions
    "LayerconfError",
    "NotReadyError",
    "NotInitializedError",
    "ConfigLoadError",
    "UnsupportedFormatError",
    "DecodeError",
    "SourceReadError",
]
