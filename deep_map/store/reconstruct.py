"""Rebuilding entry levels from flat path/value pairs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from deep_map.exceptions import PathConflictError

from .entry import Leaf, Node


if TYPE_CHECKING:
    from collections.abc import Iterable

    from deep_map.key_mapping import PathCodec

    from .entry import Level


def reconstruct_level(pairs: Iterable[tuple[str, Any]], codec: PathCodec) -> Level:
    """Build a root level from ``(path, value)`` pairs.

    Intermediate segments create nested levels on demand. A segment that
    lands on an existing leaf, or a final segment that lands on an existing
    nested level, raises :class:`PathConflictError`. A final segment that
    lands on a leaf overwrites it.
    """
    root: Level = {}
    for path, value in pairs:
        *parents, last = codec.decode(path)
        current = root
        for key in parents:
            entry = current.get(key)
            if entry is None:
                entry = Node()
                current[key] = entry
            elif isinstance(entry, Leaf):
                raise PathConflictError(path, f"{key!r} already holds a value")
            current = entry.child

        if isinstance(current.get(last), Node):
            raise PathConflictError(path, f"{last!r} already holds nested entries")
        current[last] = Leaf(value)
    return root
