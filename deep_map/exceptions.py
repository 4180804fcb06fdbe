"""Exception types raised by deep-map."""

from __future__ import annotations


class DeepMapError(Exception):
    """Base class for deep-map errors."""


class PathConflictError(DeepMapError, ValueError):
    """A path tries to traverse through, or replace, an incompatible entry."""

    def __init__(self, path: str, detail: str | None = None) -> None:
        msg = f'Path conflict at "{path}"'
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
        self.path = path


class InvalidKeyError(DeepMapError, ValueError):
    """A key cannot be represented in a dot-joined path."""

    def __init__(self, key: object, reason: str) -> None:
        msg = f"invalid key {key!r}: {reason}"
        super().__init__(msg)
        self.key = key


class SnapshotError(DeepMapError):
    """A stored snapshot cannot be read back consistently."""

    def __init__(self, name: str, detail: str) -> None:
        msg = f"snapshot {name!r} is corrupted: {detail}"
        super().__init__(msg)
        self.name = name
