"""Structured logging for layerconf using structlog.

Library modules log through ``get_logger()``, which wraps a stdlib logger
without touching structlog's process-wide configuration. Records are handed
to stdlib logging with the event name as the message and the key/value
pairs as ``extra`` fields, so the host application's handlers receive them
like any other record.

``configure_logging()`` is an explicit opt-in that attaches handlers to the
``layerconf`` logger with:
- Pretty-printed (or JSON) console output on stderr
- Optional rotating JSON file output
- UTC timestamps
- Component tracking
"""

from __future__ import annotations

import logging
import logging.handlers
import pathlib
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from layerconf.settings import LayerconfSettings

_LOGGER_NAME = "layerconf"

logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())


def _add_timestamp(
    logger: logging.Logger | None, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add UTC timestamp to log event.

    Args:
        logger: The logger instance.
        method_name: The log method name (info, error, etc.).
        event_dict: The event dictionary.

    Returns:
        Event dictionary with timestamp added.
    """
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _add_component(
    logger: logging.Logger | None, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add component name to log event from the logger name.

    Runs after structlog's add_logger_name processor, which stores the
    logger name under "logger". An explicit "component" is kept.

    Args:
        logger: The logger instance (None for records formatted by a handler).
        method_name: The log method name (info, error, etc.).
        event_dict: The event dictionary.

    Returns:
        Event dictionary with component added.
    """
    if "component" in event_dict:
        return event_dict
    logger_name = event_dict.get("logger", "")
    event_dict["component"] = logger_name.split(".")[-1] if logger_name else "unknown"
    return event_dict


def _pre_chain() -> list[Any]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        _add_timestamp,
        _add_component,
    ]


def _formatter(renderer: Any) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        foreign_pre_chain=_pre_chain(),
    )


def _configure_file_handler(log_dir: pathlib.Path) -> logging.handlers.RotatingFileHandler:
    """Configure rotating file handler for JSON logs.

    Args:
        log_dir: Directory for log files.

    Returns:
        Configured RotatingFileHandler.
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        filename=str(log_dir / "current.jsonl"),
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(_formatter(structlog.processors.JSONRenderer()))
    return handler


def _configure_console_handler(log_format: str) -> logging.StreamHandler[Any]:
    """Configure console handler.

    Args:
        log_format: "json" for JSON lines, "console" for pretty output.

    Returns:
        Configured StreamHandler.
    """
    handler = logging.StreamHandler(sys.stderr)
    renderer: Any
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    handler.setFormatter(_formatter(renderer))
    return handler


def configure_logging(settings: LayerconfSettings | None = None) -> None:
    """Attach layerconf's own handlers to the ``layerconf`` logger.

    Level, console format and log directory come from ``settings``
    (``get_settings()`` when omitted). The root logger and structlog's
    global configuration are left alone. Calling this again replaces the
    handlers instead of stacking them.

    Args:
        settings: Library settings to apply.
    """
    if settings is None:
        from layerconf.settings import get_settings  # noqa: PLC0415

        settings = get_settings()

    configured_level = getattr(logging, settings.log_level, logging.WARNING)

    package_logger = logging.getLogger(_LOGGER_NAME)
    package_logger.setLevel(configured_level)
    package_logger.handlers.clear()
    package_logger.propagate = False

    console_handler = _configure_console_handler(settings.log_format)
    console_handler.setLevel(configured_level)
    package_logger.addHandler(console_handler)

    if settings.log_dir is not None:
        file_handler = _configure_file_handler(settings.log_dir)
        file_handler.setLevel(logging.DEBUG)
        package_logger.addHandler(file_handler)


def get_logger(name: str) -> Any:  # Returns structlog.stdlib.BoundLogger
    """Get a structured logger instance.

    The logger is bound to its own processor chain, so calling this never
    configures structlog globally.

    Args:
        name: Logger name (typically __name__ of the calling module).

    Returns:
        structlog logger over the stdlib logger ``name``.

    Example:
        >>> from layerconf.telemetry import get_logger
        >>> log = get_logger(__name__)
        >>> log.info("config_load_started", sources=3)
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
