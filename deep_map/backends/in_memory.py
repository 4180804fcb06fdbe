"""In-memory backend implementation."""

from __future__ import annotations

import sys
import asyncio
from typing import TYPE_CHECKING


if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from .protocol import Backend


if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class InMemoryAsyncBackend(Backend):
    """Dict-backed backend for local development and tests."""

    def __init__(self) -> None:
        super().__init__()
        self._store: dict[str, str] = {}
        self._lock = asyncio.Lock()

    @override
    async def get(self, key: str) -> str | None:
        async with self._lock:
            return self._store.get(key)

    @override
    async def set(self, key: str, value: str) -> None:
        async with self._lock:
            self._store[key] = value

    @override
    async def delete(self, key: str) -> None:
        async with self._lock:
            _ = self._store.pop(key, None)

    @override
    async def list_keys(self, prefix: str) -> list[str]:
        async with self._lock:
            matching = [key for key in self._store if key.startswith(prefix)]
        return sorted(matching)

    @override
    async def get_many(self, keys: Sequence[str]) -> list[str | None]:
        async with self._lock:
            return [self._store.get(key) for key in keys]

    @override
    async def set_many(self, items: Mapping[str, str]) -> None:
        async with self._lock:
            self._store.update(items)

    @override
    async def delete_many(self, keys: Sequence[str]) -> None:
        async with self._lock:
            for key in keys:
                _ = self._store.pop(key, None)

    @override
    async def close(self) -> None:
        return
