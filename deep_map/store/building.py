"""Conversion between plain nested mappings and entry levels."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .entry import Leaf, Node


if TYPE_CHECKING:
    from deep_map.key_mapping import PathCodec

    from .entry import Level


def is_container(value: Any) -> bool:
    """Return True for values that are traversed into a nested level.

    Only non-callable mappings qualify; sequences, callables and every other
    object are kept as opaque leaves.
    """
    return isinstance(value, Mapping) and not callable(value)


def build_level(obj: Mapping[str, Any], codec: PathCodec) -> Level:
    """Build a level from ``obj``, recursing into container values.

    The input is not mutated and nested mappings are copied structurally;
    leaf values are stored as-is.
    """
    level: Level = {}
    for key, value in obj.items():
        _ = codec.validate_key(key)
        if is_container(value):
            level[key] = Node(build_level(value, codec))
        else:
            level[key] = Leaf(value)
    return level


def unpack_level(level: Level) -> dict[str, Any]:
    """Rebuild the plain nested dict described by ``level``."""
    return {
        key: unpack_level(entry.child) if isinstance(entry, Node) else entry.value for key, entry in level.items()
    }
