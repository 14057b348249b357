"""Priority deep merge and deep freeze for configuration trees.

Merge Behavior
--------------
Sources are merged left to right with "last wins" semantics:
  - **Dicts**: Recursively merged (keys from overlay override base)
  - **Lists**: Completely replaced (NOT appended/extended)
  - **Scalars**: Overwritten (strings, numbers, booleans, None)

Freezing
--------
The merged result is converted into read-only containers before it is
published, so references returned to callers can be shared freely:
  - Mappings become ``types.MappingProxyType`` over a fresh dict
  - Lists and tuples become tuples
  - Sets become frozensets
  - Everything else is shared as-is
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

FrozenTree = Mapping[str, Any]

EMPTY_TREE: FrozenTree = MappingProxyType({})


def deep_merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two mappings with "overlay wins".

    Rules:
      - mapping + mapping -> deep merge
      - sequence + anything -> overlay REPLACES base (not concatenated)
      - everything else -> overlay overwrites base

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        current = result.get(k)
        if k in result and isinstance(current, Mapping) and isinstance(v, Mapping):
            result[k] = deep_merge(current, v)
        else:
            # Replace lists and scalars entirely
            result[k] = v
    return result


def merge_all(layers: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Merge layers in ascending priority order (the last layer wins)."""
    merged: dict[str, Any] = {}
    for layer in layers:
        merged = deep_merge(merged, layer)
    return merged


def deep_freeze(value: Any) -> Any:
    """Return a recursively immutable copy of ``value``."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: deep_freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(deep_freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(deep_freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Return a plain, mutable deep copy of a frozen tree.

    Useful when handing configuration to code that expects real dicts and
    lists (serializers, pydantic models).
    """
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    if isinstance(value, frozenset):
        # Members are hashable already; thawing them could make them unhashable
        return set(value)
    return value
