"""Persisting deep maps as flat path/value snapshots in a KV backend."""

from __future__ import annotations

import asyncio
import json
import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Self, TypeVar

from deep_map.exceptions import SnapshotError
from deep_map.key_mapping import DEFAULT_CODEC, KeyMapper, PathCodec
from deep_map.store import DeepMap


if TYPE_CHECKING:
    from collections.abc import Coroutine
    from concurrent.futures import Future
    from types import TracebackType

    from deep_map.backends import Backend


logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class _AsyncLoopBridge:
    """Bridge sync calls to async backend operations on a dedicated loop."""

    def __init__(self) -> None:
        super().__init__()
        self._loop_ready = threading.Event()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread = threading.Thread(target=self._run, name="deep-map-snapshots", daemon=True)
        self._thread.start()
        _ = self._loop_ready.wait()

    def _run(self) -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        self._loop = loop
        self._loop_ready.set()
        loop.run_forever()

    def run(self, coroutine: Coroutine[Any, Any, _T]) -> _T:
        if self._loop is None:
            msg = "snapshot store async loop not initialized"
            raise RuntimeError(msg)
        future: Future[_T] = asyncio.run_coroutine_threadsafe(coroutine, self._loop)
        return future.result()

    def close(self) -> None:
        if self._loop is None:
            return
        _ = self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=5)
        self._loop = None


class SnapshotStore:
    """Save and load named ``DeepMap`` snapshots through an async backend.

    Each snapshot is stored in its flat form: one backend key per entry path
    holding the JSON-encoded leaf value, plus a marker key holding the
    ordered list of entry paths. Loading rebuilds the map with
    :meth:`DeepMap.from_entries`.

    >>> from deep_map.backends import InMemoryAsyncBackend
    >>> with SnapshotStore(InMemoryAsyncBackend(), entry_point="app") as snapshots:
    ...     snapshots.save("config", DeepMap({"db": {"host": "localhost"}}))
    ...     snapshots.load("config").unpack()
    1
    {'db': {'host': 'localhost'}}
    """

    def __init__(
        self,
        backend: Backend,
        entry_point: str,
        sep: str = ":",
        json_encoder: Callable[[Any], str] = json.dumps,
        json_decoder: Callable[[str], Any] = json.loads,
        codec: PathCodec = DEFAULT_CODEC,
    ) -> None:
        super().__init__()
        self._backend = backend
        self._mapper = KeyMapper(entry_point=entry_point, sep=sep)
        self._json_encoder = json_encoder
        self._json_decoder = json_decoder
        self._codec = codec
        self._bridge = _AsyncLoopBridge()

    def _snapshot_keys(self, name: str) -> list[str]:
        marker = self._mapper.marker_key(name)
        entry_prefix = self._mapper.entry_prefix(name)
        keys = self._bridge.run(self._backend.list_keys(marker))
        return [key for key in keys if key == marker or key.startswith(entry_prefix)]

    def save(self, name: str, deep_map: DeepMap) -> int:
        """Store ``deep_map`` under ``name``, replacing any previous snapshot.

        Returns the number of entries written. Values are encoded before
        anything is written, so an unencodable leaf leaves the backend as it
        was. New keys are written before stale ones are removed, so a failed
        write leaves the previous snapshot loadable.

        Raises ``ValueError`` when ``deep_map`` uses a different path codec
        than this store, since its paths would not decode back to the same
        structure.
        """
        if deep_map.codec != self._codec:
            msg = f"deep map codec {deep_map.codec!r} does not match snapshot store codec {self._codec!r}"
            raise ValueError(msg)

        paths: list[str] = []
        items: dict[str, str] = {}
        for path, value in deep_map.iter_entries():
            paths.append(path)
            items[self._mapper.entry_key(name, path)] = self._json_encoder(value)
        items[self._mapper.marker_key(name)] = self._json_encoder(paths)

        stale = [key for key in self._snapshot_keys(name) if key not in items]
        self._bridge.run(self._backend.set_many(items))
        if stale:
            self._bridge.run(self._backend.delete_many(stale))

        logger.debug("Saved snapshot %r with %d entries (%d stale keys removed)", name, len(paths), len(stale))
        return len(paths)

    def load(self, name: str) -> DeepMap:
        """Rebuild the snapshot stored under ``name`` in its original entry order.

        Raises ``KeyError`` when no such snapshot exists and
        :class:`~deep_map.exceptions.SnapshotError` when entries listed in the
        marker are missing from the backend.
        """
        raw_marker = self._bridge.run(self._backend.get(self._mapper.marker_key(name)))
        if raw_marker is None:
            raise KeyError(name)

        paths: list[str] = self._json_decoder(raw_marker)
        entry_keys = [self._mapper.entry_key(name, path) for path in paths]
        raw_values = self._bridge.run(self._backend.get_many(entry_keys))

        missing = [path for path, raw in zip(paths, raw_values, strict=True) if raw is None]
        if missing:
            raise SnapshotError(name, f"missing entries {missing!r}")

        pairs = [(path, self._json_decoder(raw)) for path, raw in zip(paths, raw_values, strict=True)]
        logger.debug("Loaded snapshot %r with %d entries", name, len(pairs))
        return DeepMap.from_entries(pairs, codec=self._codec)

    def delete(self, name: str) -> None:
        """Remove the snapshot stored under ``name``; ``KeyError`` when absent."""
        keys = self._snapshot_keys(name)
        if self._mapper.marker_key(name) not in keys:
            raise KeyError(name)
        self._bridge.run(self._backend.delete_many(keys))
        logger.debug("Deleted snapshot %r", name)

    def names(self) -> list[str]:
        """Return the sorted names of stored snapshots."""
        keys = self._bridge.run(self._backend.list_keys(self._mapper.prefix))
        names: set[str] = set()
        for key in keys:
            try:
                name, path = self._mapper.split(key)
            except ValueError:
                logger.debug("Ignoring foreign backend key %r", key)
                continue
            if path is None:
                names.add(name)
        return sorted(names)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return name in self.names()

    def close(self) -> None:
        """Close backend and bridge resources."""
        self._bridge.run(self._backend.close())
        self._bridge.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
