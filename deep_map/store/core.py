"""Read-only, path-addressable view over a nested mapping."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any, Self


if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from deep_map.key_mapping import DEFAULT_CODEC, PathCodec

from .building import build_level, unpack_level
from .entry import Node
from .reconstruct import reconstruct_level
from .walking import iter_entries


if TYPE_CHECKING:
    from .entry import Entry, Level


_MISSING = object()


class DeepMap(Mapping[str, Any]):
    """Immutable nested mapping addressable by key or by dot-joined path.

    Nested mappings in the source become nested ``DeepMap`` levels; every
    other value (lists, tuples, callables, scalars) is stored as an opaque
    leaf. A ``DeepMap`` never changes after construction.

    >>> data = DeepMap({"user": {"name": "Alice"}, "active": True})
    >>> data.entries()
    [('user.name', 'Alice'), ('active', True)]
    >>> data.get_path("user.name")
    'Alice'
    """

    __slots__ = ("_codec", "_level")

    def __init__(self, obj: Mapping[str, Any] | None = None, *, codec: PathCodec = DEFAULT_CODEC) -> None:
        super().__init__()
        self._codec = codec
        self._level: Level = build_level(obj, codec) if obj is not None else {}

    @classmethod
    def _wrap(cls, level: Level, codec: PathCodec) -> Self:
        instance = cls.__new__(cls)
        instance._codec = codec
        instance._level = level
        return instance

    @classmethod
    def from_entries(
        cls,
        pairs: Iterable[tuple[str, Any]] | Mapping[str, Any],
        *,
        codec: PathCodec = DEFAULT_CODEC,
    ) -> Self:
        """Build a map from flat ``(path, value)`` pairs.

        Raises :class:`~deep_map.exceptions.PathConflictError` when a path
        goes through a value assigned earlier, or when a path ends where
        nested entries already exist.
        """
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        return cls._wrap(reconstruct_level(pairs, codec), codec)

    @property
    def codec(self) -> PathCodec:
        """Codec used to encode and decode paths for this map."""
        return self._codec

    def _resolve(self, entry: Entry) -> Any:
        if isinstance(entry, Node):
            return self._wrap(entry.child, self._codec)
        return entry.value

    @override
    def __getitem__(self, key: str) -> Any:
        """Return the leaf value at ``key``, or a ``DeepMap`` for a nested level."""
        return self._resolve(self._level[key])

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._level)

    @override
    def __len__(self) -> int:
        return len(self._level)

    @override
    def __contains__(self, key: object) -> bool:
        return key in self._level

    def has(self, key: str) -> bool:
        """Return True when ``key`` exists at this level; paths are not followed."""
        return key in self._level

    def get_path(self, path: str, default: Any = None) -> Any:
        """Return the value at a dot-joined ``path``, or ``default`` when absent."""
        level = self._level
        *parents, last = self._codec.decode(path)
        for key in parents:
            entry = level.get(key)
            if not isinstance(entry, Node):
                return default
            level = entry.child
        entry = level.get(last)
        if entry is None:
            return default
        return self._resolve(entry)

    def has_path(self, path: str) -> bool:
        """Return True when an entry exists at a dot-joined ``path``."""
        return self.get_path(path, _MISSING) is not _MISSING

    def iter_entries(self) -> Iterator[tuple[str, Any]]:
        """Lazily yield ``(path, value)`` for every leaf in pre-order."""
        return iter_entries(self._level, self._codec)

    def entries(self) -> list[tuple[str, Any]]:
        """Return ``(path, value)`` for every leaf in pre-order."""
        return list(self.iter_entries())

    def unpack(self) -> dict[str, Any]:
        """Return a plain nested ``dict`` with the same shape and values."""
        return unpack_level(self._level)

    def leaf_count(self) -> int:
        """Number of leaves reachable from this level."""
        return sum(1 for _ in self.iter_entries())

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, DeepMap):
            return self._level == other._level
        if isinstance(other, Mapping):
            return self.unpack() == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.unpack()!r})"

