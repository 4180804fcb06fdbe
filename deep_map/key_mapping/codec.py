"""Encoding between key sequences and separator-joined path strings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from deep_map.exceptions import InvalidKeyError


if TYPE_CHECKING:
    from collections.abc import Iterable


class PathCodec:
    """Join key sequences into paths and split paths back into keys."""

    def __init__(self, sep: str = ".") -> None:
        super().__init__()
        if not sep:
            msg = "sep must not be empty"
            raise ValueError(msg)
        self.sep = sep

    def encode(self, keys: Iterable[str]) -> str:
        """Join keys with the separator; an empty sequence gives ``""``."""
        return self.sep.join(keys)

    def decode(self, path: str) -> tuple[str, ...]:
        """Split a path into its keys.

        ``decode("")`` yields a single empty segment, mirroring ``str.split``.
        """
        return tuple(path.split(self.sep))

    def validate_key(self, key: object) -> str:
        """Return ``key`` when it can round-trip through this codec."""
        if not isinstance(key, str):
            raise InvalidKeyError(key, "keys must be strings")
        if self.sep in key:
            raise InvalidKeyError(key, f"keys must not contain separator {self.sep!r}")
        return key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathCodec):
            return NotImplemented
        return self.sep == other.sep

    def __hash__(self) -> int:
        return hash(self.sep)

    def __repr__(self) -> str:
        return f"PathCodec(sep={self.sep!r})"


DEFAULT_CODEC = PathCodec()
