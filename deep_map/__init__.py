"""deep-map - reversible, path-addressable nested mappings"""

from ._version import version as __version__
from .backends import Backend, InMemoryAsyncBackend, RedisBackend
from .exceptions import DeepMapError, InvalidKeyError, PathConflictError, SnapshotError
from .forest import Forest, SkippedRecord, make_tree
from .key_mapping import DEFAULT_CODEC, KeyMapper, PathCodec
from .snapshots import SnapshotStore
from .store import DeepMap, Leaf, Node


__all__ = [
    "DEFAULT_CODEC",
    "Backend",
    "DeepMap",
    "DeepMapError",
    "Forest",
    "InMemoryAsyncBackend",
    "InvalidKeyError",
    "KeyMapper",
    "Leaf",
    "Node",
    "PathCodec",
    "PathConflictError",
    "RedisBackend",
    "SkippedRecord",
    "SnapshotError",
    "SnapshotStore",
    "__version__",
    "make_tree",
]
