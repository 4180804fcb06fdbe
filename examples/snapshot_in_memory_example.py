"""Minimal example for SnapshotStore using the in-memory backend."""

from deep_map import DeepMap, SnapshotStore
from deep_map.backends.in_memory import InMemoryAsyncBackend


def main() -> None:
    """Run a basic save/load/delete flow on the in-memory backend."""
    backend = InMemoryAsyncBackend()
    with SnapshotStore(backend=backend, entry_point="ep1", sep=":") as snapshots:
        written = snapshots.save("config", DeepMap({"db": {"host": "localhost", "port": 5432}}))
        print("entries written:", written)
        print("config:", snapshots.load("config").unpack())
        print("names:", snapshots.names())

        snapshots.delete("config")
        print("after delete names:", snapshots.names())


if __name__ == "__main__":
    main()
