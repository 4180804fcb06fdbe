"""Backend contracts and implementations."""

from .in_memory import InMemoryAsyncBackend
from .protocol import Backend
from .redis import RedisBackend


__all__ = ["Backend", "InMemoryAsyncBackend", "RedisBackend"]
