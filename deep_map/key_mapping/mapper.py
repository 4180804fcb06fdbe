"""Key mapping between named snapshots and backend KV keys."""

from __future__ import annotations


class KeyMapper:
    """Map snapshot names and entry paths onto entry-point-prefixed backend keys.

    A snapshot ``name`` owns one marker key ``<entry_point><sep><name>`` and one
    key per entry, ``<entry_point><sep><name><sep><path>``. Entry paths are
    opaque to the mapper and may themselves contain the separator.
    """

    def __init__(self, entry_point: str, sep: str = ":") -> None:
        super().__init__()
        if not entry_point:
            msg = "entry_point must not be empty"
            raise ValueError(msg)
        if not sep:
            msg = "sep must not be empty"
            raise ValueError(msg)
        if sep in entry_point:
            msg = "entry_point must not contain separator"
            raise ValueError(msg)

        self.entry_point = entry_point
        self.sep = sep
        self.prefix = f"{entry_point}{sep}"

    def _check_name(self, name: str) -> str:
        if not name:
            msg = "snapshot name must not be empty"
            raise ValueError(msg)
        if self.sep in name:
            msg = "snapshot name must not contain separator"
            raise ValueError(msg)
        return name

    def marker_key(self, name: str) -> str:
        """Backend key that records the existence of a snapshot."""
        return self.prefix + self._check_name(name)

    def entry_prefix(self, name: str) -> str:
        """Common prefix of every entry key of snapshot ``name``."""
        return f"{self.marker_key(name)}{self.sep}"

    def entry_key(self, name: str, path: str) -> str:
        """Backend key holding the value stored at ``path`` in snapshot ``name``."""
        return self.entry_prefix(name) + path

    def matches(self, kv_key: str) -> bool:
        """Return True when a backend key belongs to this entry point."""
        return kv_key.startswith(self.prefix)

    def split(self, kv_key: str) -> tuple[str, str | None]:
        """Split a backend key into ``(name, path)``; ``path`` is None for markers."""
        if not self.matches(kv_key):
            msg = f"key does not match entry point prefix: {kv_key}"
            raise ValueError(msg)

        relative = kv_key.removeprefix(self.prefix)
        if not relative:
            msg = "relative key path must not be empty"
            raise ValueError(msg)
        name, sep, path = relative.partition(self.sep)
        if not name:
            msg = f"invalid key with empty snapshot name: {kv_key}"
            raise ValueError(msg)
        if not sep:
            return name, None
        return name, path
