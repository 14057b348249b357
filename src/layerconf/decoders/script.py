"""Python script configuration sources.

A ``.py`` source is compiled and executed, and its module-level ``config``
attribute becomes the configuration value. When ``config`` is callable it is
called with no arguments (and awaited if it returns an awaitable):

    # settings.py
    import os

    def config():
        return {"database": {"host": os.environ.get("DB_HOST", "localhost")}}

Security:
    Scripts run with the full privileges of the host process. Only load
    trusted files; set ``LAYERCONF_ALLOW_SCRIPT_SOURCES=false`` to disable
    the format.

Unlike the strict formats, a script that fails to evaluate does not abort the
load: it contributes an empty mapping and a warning is logged. This includes
a script whose ``config`` is not a mapping (``config = [1]``).
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Mapping
from typing import Any

from layerconf.telemetry import SCRIPT_SOURCE_FAILED, get_logger

log = get_logger(__name__)

EXPORT_NAME = "config"


def _evaluate(text: str, path: str) -> Any:
    code = compile(text, path, "exec")
    namespace: dict[str, Any] = {"__name__": "__layerconf_script__", "__file__": path}
    exec(code, namespace)  # noqa: S102
    if EXPORT_NAME not in namespace:
        raise LookupError(f"script does not define '{EXPORT_NAME}'")
    value = namespace[EXPORT_NAME]
    return value() if callable(value) else value


class ScriptDecoder:
    """Evaluates trusted Python source and returns its ``config`` export."""

    async def decode(self, text: str, path: str) -> Any:
        try:
            value = await asyncio.to_thread(_evaluate, text, path)
            if inspect.isawaitable(value):
                value = await value
            if value is not None and not isinstance(value, Mapping):
                raise TypeError(f"'{EXPORT_NAME}' must be a mapping, got {type(value).__name__}")
        except Exception as e:
            log.warning(
                SCRIPT_SOURCE_FAILED,
                path=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            return {}
        return value

    def __repr__(self) -> str:
        return "ScriptDecoder()"


SCRIPT_DECODER = ScriptDecoder()
