"""Telemetry module for structured logging.

This module provides:
- Structured logging via structlog
- Semantic event constants

Importing the package configures nothing. Call configure_logging() to
attach layerconf handlers; otherwise records go to whatever handlers the
host application set up.
"""

from layerconf.telemetry.events import (
    CONFIG_LOAD_COMPLETED,
    CONFIG_LOAD_JOINED,
    CONFIG_LOAD_STARTED,
    CONFIG_SOURCE_ADDED,
    CONFIG_SOURCE_REMOVED,
    REGISTRY_INITIALIZED,
    SCRIPT_SOURCE_FAILED,
    SETTINGS_LOADED,
)
from layerconf.telemetry.logger import configure_logging, get_logger

__all__ = [
    "get_logger",
    "configure_logging",
    # Event constants
    "CONFIG_LOAD_STARTED",
    "CONFIG_LOAD_COMPLETED",
    "CONFIG_LOAD_JOINED",
    "CONFIG_SOURCE_ADDED",
    "CONFIG_SOURCE_REMOVED",
    "SCRIPT_SOURCE_FAILED",
    "REGISTRY_INITIALIZED",
    "SETTINGS_LOADED",
]
