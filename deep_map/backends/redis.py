"""Redis-compatible backend implementation."""

from __future__ import annotations

import re
import sys
from inspect import isawaitable
from typing import TYPE_CHECKING, Any


if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override


try:
    import redis.asyncio as redis_async
except ImportError:  # pragma: no cover - exercised when dependency is absent
    redis_async = None

from .protocol import Backend


if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def _escape_pattern(prefix: str) -> str:
    """Escape glob metacharacters so a prefix matches literally in ``SCAN MATCH``."""
    return re.sub(r"([\\*?\[\]])", r"\\\1", prefix)


def _normalize_string(value: str | bytes | None) -> str | None:
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode()
    return value


class RedisBackend(Backend):
    """Redis backend using ``redis.asyncio`` client APIs.

    Batch operations map onto ``MGET``, ``MSET`` and multi-key ``DEL`` so a
    snapshot is written and read in a constant number of round trips.
    """

    def __init__(self, url: str = "redis://localhost:6379/0", *, client: Any | None = None) -> None:
        """Create a backend from URL or an injected async client.

        Parameters
        ----------
        url
            Redis connection URL used when ``client`` is not provided.
        client
            Optional injected client with ``get/set/delete/mget/mset/scan_iter/aclose`` API.
        """
        super().__init__()
        self._url = url
        if client is not None:
            self._client = client
            return

        if redis_async is None:
            msg = "redis dependency is required for RedisBackend; install with `uv add redis`"
            raise RuntimeError(msg)

        self._client = redis_async.from_url(url, decode_responses=True)

    @override
    async def get(self, key: str) -> str | None:
        return _normalize_string(await self._client.get(key))

    @override
    async def set(self, key: str, value: str) -> None:
        await self._client.set(key, value)

    @override
    async def delete(self, key: str) -> None:
        await self._client.delete(key)

    @override
    async def list_keys(self, prefix: str) -> list[str]:
        keys: list[str] = []
        async for key in self._client.scan_iter(match=f"{_escape_pattern(prefix)}*"):
            normalized = _normalize_string(key)
            if normalized is not None and normalized.startswith(prefix):
                keys.append(normalized)
        return sorted(keys)

    @override
    async def get_many(self, keys: Sequence[str]) -> list[str | None]:
        if not keys:
            return []
        values = await self._client.mget(list(keys))
        return [_normalize_string(value) for value in values]

    @override
    async def set_many(self, items: Mapping[str, str]) -> None:
        if not items:
            return
        await self._client.mset(dict(items))

    @override
    async def delete_many(self, keys: Sequence[str]) -> None:
        if not keys:
            return
        await self._client.delete(*keys)

    @override
    async def close(self) -> None:
        close_method = getattr(self._client, "aclose", None)
        if close_method is None:
            close_method = getattr(self._client, "close", None)
        if close_method is None:
            return

        maybe_awaitable = close_method()
        if isawaitable(maybe_awaitable):
            await maybe_awaitable
