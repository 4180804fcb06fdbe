"""Depth-first flattening of entry levels into path/value pairs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .entry import Node


if TYPE_CHECKING:
    from collections.abc import Iterator

    from deep_map.key_mapping import PathCodec

    from .entry import Level


def iter_entries(level: Level, codec: PathCodec, prefix: tuple[str, ...] = ()) -> Iterator[tuple[str, Any]]:
    """Yield ``(path, value)`` for every leaf below ``level`` in pre-order.

    Keys are visited in insertion order at every level. Internal nodes are
    never yielded, so an empty nested level contributes nothing.
    """
    for key, entry in level.items():
        keys = (*prefix, key)
        if isinstance(entry, Node):
            yield from iter_entries(entry.child, codec, keys)
        else:
            yield codec.encode(keys), entry.value
