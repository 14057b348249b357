"""Decoder interface and extension registry.

A decoder turns the text of a file source into a plain nested value. The
registry selects a decoder from the file extension (lower-cased, without the
leading dot) and is pluggable: applications can register extra formats or
drop the script format entirely.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from typing import Any, Protocol

from layerconf.exceptions import DecodeError, UnsupportedFormatError


class FormatDecoder(Protocol):
    """Turns file text into a configuration value."""

    async def decode(self, text: str, path: str) -> Any:
        """Decode ``text`` read from ``path``.

        Raises:
            DecodeError: If the content is malformed.
        """
        ...


class StrictDecoder:
    """Adapts a synchronous ``text -> value`` parser to FormatDecoder.

    Parser errors are re-raised as DecodeError, which aborts the load pass.

    Attributes:
        name: Format name used in error messages (e.g. "YAML").
        parse: The parser callable.
        errors: Exception types the parser raises for malformed input.
    """

    def __init__(
        self,
        name: str,
        parse: Callable[[str], Any],
        errors: tuple[type[BaseException], ...] = (ValueError,),
    ):
        self.name = name
        self.parse = parse
        self.errors = errors

    async def decode(self, text: str, path: str) -> Any:
        try:
            return self.parse(text)
        except self.errors as e:
            raise DecodeError(f"Failed to parse {self.name} file {path}: {e}", source=path) from e

    def __repr__(self) -> str:
        return f"StrictDecoder({self.name!r})"


def extension_of(path: str | os.PathLike[str]) -> str:
    """Lower-cased extension of ``path`` without the leading dot."""
    _, ext = os.path.splitext(os.fspath(path))
    return ext[1:].lower()


class DecoderRegistry:
    """Maps file extensions to decoders.

    Example:
        >>> registry = DecoderRegistry()
        >>> registry.register("ini", my_ini_decoder)
        >>> registry.for_path("settings.INI") is my_ini_decoder
        True
    """

    def __init__(self, decoders: dict[str, FormatDecoder] | None = None):
        self._decoders: dict[str, FormatDecoder] = {}
        for ext, decoder in (decoders or {}).items():
            self.register(ext, decoder)

    def register(self, extension: str, decoder: FormatDecoder) -> None:
        """Register (or replace) the decoder for ``extension``."""
        self._decoders[extension.lstrip(".").lower()] = decoder

    def unregister(self, extension: str) -> None:
        """Remove the decoder for ``extension`` if one is registered."""
        self._decoders.pop(extension.lstrip(".").lower(), None)

    def for_path(self, path: str | os.PathLike[str]) -> FormatDecoder:
        """Decoder for the extension of ``path``.

        Raises:
            UnsupportedFormatError: If no decoder is registered for it.
        """
        ext = extension_of(path)
        try:
            return self._decoders[ext]
        except KeyError:
            raise UnsupportedFormatError(
                f"Unsupported file extension '{ext}' for source {os.fspath(path)}",
                source=os.fspath(path),
            ) from None

    @property
    def extensions(self) -> list[str]:
        return sorted(self._decoders)

    def __contains__(self, extension: object) -> bool:
        return isinstance(extension, str) and extension.lstrip(".").lower() in self._decoders

    def __iter__(self) -> Iterator[str]:
        return iter(self._decoders)
