"""Ordered list of configuration sources.

A source is either an inline value (normally a mapping) or a reference to a
file (``str`` or ``os.PathLike``). The position of a source in the list is its
merge priority: later sources override earlier ones.

Matching rules used by ``remove``/``index_of``:
- File references match by exact string equality of ``os.fspath(source)``
- Inline values match by identity; an equal but distinct object is a
  different source
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any, overload

Source = Any


def is_file_source(source: Source) -> bool:
    """Return True if ``source`` refers to a file rather than an inline value."""
    return isinstance(source, (str, os.PathLike))


def source_label(source: Source) -> str:
    """Short human-readable description of a source for logs and errors."""
    if is_file_source(source):
        return os.fspath(source)
    return f"<inline {type(source).__name__}>"


def _matches(candidate: Source, source: Source) -> bool:
    if is_file_source(source):
        return is_file_source(candidate) and os.fspath(candidate) == os.fspath(source)
    return candidate is source


class SourceList(MutableSequence[Source]):
    """Mutable, ordered collection of sources in ascending priority.

    Example:
        >>> sources = SourceList([{"debug": False}])
        >>> sources.append("base.yaml", "local.toml")
        >>> sources.remove("base.yaml")
        True
        >>> sources.remove("missing.json")
        False
    """

    def __init__(self, sources: Iterable[Source] = ()):
        self._items: list[Source] = list(sources)

    @overload
    def __getitem__(self, index: int) -> Source: ...

    @overload
    def __getitem__(self, index: slice) -> list[Source]: ...

    def __getitem__(self, index: int | slice) -> Source | list[Source]:
        return self._items[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._items[index] = value

    def __delitem__(self, index: int | slice) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Source]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SourceList({[source_label(s) for s in self._items]!r})"

    def insert(self, index: int, value: Source) -> None:
        self._items.insert(index, value)

    def append(self, *sources: Source) -> None:  # type: ignore[override]
        """Add sources at the end of the list (highest priority)."""
        self._items.extend(sources)

    def index_of(self, source: Source) -> int:
        """Position of the first entry matching ``source``, or -1."""
        for index, candidate in enumerate(self._items):
            if _matches(candidate, source):
                return index
        return -1

    def remove(self, source: Source) -> bool:  # type: ignore[override]
        """Remove the first entry matching ``source``.

        Returns:
            True if an entry was removed, False if nothing matched.
        """
        index = self.index_of(source)
        if index < 0:
            return False
        del self._items[index]
        return True

    def snapshot(self) -> tuple[Source, ...]:
        """Immutable copy of the current order, used for one load pass."""
        return tuple(self._items)
