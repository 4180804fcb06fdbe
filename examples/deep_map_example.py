"""Minimal example of building, flattening and rebuilding a DeepMap."""

from deep_map import DeepMap, PathConflictError


def main() -> None:
    """Walk a nested object through its flat form and back."""
    profile = DeepMap({"user": {"name": "Alice", "address": {"city": "Wonderland", "zip": 12345}}, "active": True})
    print(f"{profile=}")
    print("city:", profile.get_path("user.address.city"))
    print("user keys:", list(profile["user"]))

    entries = profile.entries()
    for path, value in entries:
        print(f"  {path} = {value!r}")

    rebuilt = DeepMap.from_entries(entries)
    print("round trip equal:", rebuilt == profile)

    try:
        _ = DeepMap.from_entries([("a.b", 1), ("a.b.c", 2)])
    except PathConflictError as error:
        print("conflict:", error)


if __name__ == "__main__":
    main()
