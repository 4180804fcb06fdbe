"""Minimal example for SnapshotStore using a Redis-compatible backend."""

from deep_map import DeepMap, SnapshotStore
from deep_map.backends.redis import RedisBackend


def main() -> None:
    """Save, reload and replace a snapshot against Redis/Dragonfly."""
    backend = RedisBackend(url="redis://redis:6379/0")
    with SnapshotStore(backend=backend, entry_point="ep1", sep=":") as snapshots:
        _ = snapshots.save("user", DeepMap({"alice": {"age": 30, "roles": ["admin"]}}))
        print("user:", snapshots.load("user"))

        _ = snapshots.save("user", DeepMap({"alice": {"age": 42}}))
        user = snapshots.load("user")
        print("age after replace:", user.get_path("alice.age"))
        assert not user.has_path("alice.roles")  # noqa: S101


if __name__ == "__main__":
    main()
