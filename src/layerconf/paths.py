"""Path expressions into a configuration tree.

A path addresses a value inside nested mappings and sequences. Both dotted
and indexed notations are accepted, and may be mixed:

    server.endpoints[1].method
    server,endpoints,1,method
    server.endpoints.1.method

Resolution first splits on commas and brackets only, which keeps keys that
contain dots reachable (``get("a.b")`` finds a literal ``"a.b"`` key). When
that traversal finds nothing, the path is split again on dots as well.

A numeric segment also reaches an integer mapping key, as YAML produces for
``codes: {404: not_found}`` (``codes.404`` and ``codes[404]``).
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

_PRIMARY_DELIMITERS = re.compile(r"[,\[\]]+")
_ALL_DELIMITERS = re.compile(r"[,\[\].]+")

# Marks a lookup that found nothing, as opposed to an explicit None value
_MISSING = object()


def parse_path(path: str, split_dots: bool = False) -> list[str]:
    """Split a path expression into its non-empty segments.

    Args:
        path: Path expression, e.g. ``"a.b[2].c"``.
        split_dots: Also treat ``.`` as a delimiter.

    Returns:
        List of segments with empty entries removed.

    Example:
        >>> parse_path("a,b[2]")
        ['a', 'b', '2']
        >>> parse_path("a.b[2].c", split_dots=True)
        ['a', 'b', '2', 'c']
    """
    pattern = _ALL_DELIMITERS if split_dots else _PRIMARY_DELIMITERS
    return [segment for segment in pattern.split(path) if segment]


def _step(node: Any, segment: str) -> Any:
    if isinstance(node, Mapping):
        value = node.get(segment, _MISSING)
        if value is _MISSING and segment.isascii() and segment.isdigit():
            value = node.get(int(segment), _MISSING)
        return value
    if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
        if not (segment.isascii() and segment.isdigit()):
            return _MISSING
        index = int(segment)
        return node[index] if index < len(node) else _MISSING
    return _MISSING


def _travel(tree: Mapping[str, Any], segments: list[str]) -> Any:
    node: Any = tree
    for segment in segments:
        # Short-circuit on a missing or null intermediate
        if node is None or node is _MISSING:
            return _MISSING
        node = _step(node, segment)
    return node


def get_path(tree: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """Resolve ``path`` against ``tree``.

    Args:
        tree: Root mapping.
        path: Path expression (see module docstring).
        default: Returned when the path does not resolve, or resolves to the
            root itself (an empty path).

    Returns:
        The value at ``path`` or ``default``.
    """
    result = _travel(tree, parse_path(path))
    if result is _MISSING:
        result = _travel(tree, parse_path(path, split_dots=True))
    if result is _MISSING or result is tree:
        return default
    return result
