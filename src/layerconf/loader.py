"""Resolve sources and build the merged configuration tree.

One load pass:
  1) Resolve every source concurrently
     - inline values are used as-is
     - file references are read as text (aiofiles) and decoded by the
       decoder registered for their extension
  2) Stop at the first failure; nothing is merged or published
  3) Deep-merge the resolved values in source order (later wins)
  4) Deep-freeze the result

Error Handling
--------------
- SourceReadError: file cannot be read
- UnsupportedFormatError: no decoder for the extension
- DecodeError: malformed content, or a source whose top level is not a mapping
"""

from __future__ import annotations

import asyncio
import os
from collections.abc import Iterable, Mapping
from typing import Any

import aiofiles

from layerconf.decoders import DecoderRegistry
from layerconf.exceptions import DecodeError, SourceReadError
from layerconf.merge import FrozenTree, deep_freeze, merge_all
from layerconf.sources import Source, is_file_source, source_label


async def read_text(path: str, encoding: str = "utf-8") -> str:
    """Read a file source as text.

    Raises:
        SourceReadError: If the file cannot be opened, read or decoded.
    """
    try:
        async with aiofiles.open(path, encoding=encoding) as f:
            return await f.read()
    except FileNotFoundError:
        raise SourceReadError(f"Configuration file not found: {path}", source=path) from None
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Failed to read configuration file {path}: {e}", source=path) from e


async def resolve_source(
    source: Source, decoders: DecoderRegistry, encoding: str = "utf-8"
) -> Mapping[str, Any]:
    """Resolve one source to a mapping.

    Args:
        source: Inline value or file reference.
        decoders: Registry used to pick a decoder for file references.
        encoding: Text encoding for file references.

    Returns:
        The source's mapping. ``None`` (e.g. an empty YAML file) resolves to
        an empty mapping.

    Raises:
        ConfigLoadError: Any subclass, when the source cannot be resolved.
    """
    if is_file_source(source):
        path = os.fspath(source)
        decoder = decoders.for_path(path)
        text = await read_text(path, encoding)
        value = await decoder.decode(text, path)
    else:
        value = source

    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise DecodeError(
            f"Top level of configuration source {source_label(source)} must be a mapping, "
            f"got {type(value).__name__}",
            source=source_label(source),
        )
    return value


async def load_sources(
    sources: Iterable[Source], decoders: DecoderRegistry, encoding: str = "utf-8"
) -> FrozenTree:
    """Resolve all sources concurrently and return the frozen merged tree.

    Every resolution runs to completion before the outcome is decided, so
    the reported error is always the one from the earliest failing source.

    Raises:
        ConfigLoadError: If any source fails; no partial result is returned.
    """
    results = await asyncio.gather(
        *(resolve_source(source, decoders, encoding) for source in sources),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return deep_freeze(merge_all(results))
