"""Backend interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class Backend(ABC):
    """Async key-value backend holding raw string values.

    Concrete backends implement the single-key operations; the batch helpers
    fall back to one call per key and may be overridden with native batching.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return raw value for key, or None when key does not exist."""

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store raw value for key."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete key if present."""

    @abstractmethod
    async def list_keys(self, prefix: str) -> list[str]:
        """List all keys beginning with prefix in sorted order."""

    @abstractmethod
    async def close(self) -> None:
        """Close any backend resources."""

    async def get_many(self, keys: Sequence[str]) -> list[str | None]:
        """Return raw values for keys, in order, with None for missing keys."""
        return [await self.get(key) for key in keys]

    async def set_many(self, items: Mapping[str, str]) -> None:
        """Store several raw values."""
        for key, value in items.items():
            await self.set(key, value)

    async def delete_many(self, keys: Sequence[str]) -> None:
        """Delete several keys, ignoring missing ones."""
        for key in keys:
            await self.delete(key)
