from typing import Any

from hypothesis import given
from hypothesis import strategies as st

from deep_map import DeepMap


_KEYS = st.text(max_size=8).filter(lambda value: "." not in value)
_LEAVES = (
    st.none()
    | st.booleans()
    | st.integers(min_value=-10_000, max_value=10_000)
    | st.text(max_size=12)
    | st.lists(st.integers(), max_size=3)
)
_OBJECTS = st.recursive(
    st.dictionaries(_KEYS, _LEAVES, max_size=4),
    lambda children: st.dictionaries(_KEYS, _LEAVES | children.filter(bool), max_size=4),
    max_leaves=20,
)


def _count_leaves(obj: dict[str, Any]) -> int:
    return sum(_count_leaves(value) if isinstance(value, dict) else 1 for value in obj.values())


def _preorder_paths(obj: dict[str, Any], prefix: str = "") -> list[str]:
    paths: list[str] = []
    for key, value in obj.items():
        if isinstance(value, dict):
            paths.extend(_preorder_paths(value, f"{prefix}{key}."))
        else:
            paths.append(f"{prefix}{key}")
    return paths


@given(obj=_OBJECTS)
def test_unpack_roundtrip_property(obj: dict[str, Any]) -> None:
    unpacked = DeepMap(obj).unpack()
    assert unpacked == obj
    assert list(unpacked) == list(obj)


@given(obj=_OBJECTS)
def test_flat_roundtrip_property(obj: dict[str, Any]) -> None:
    deep = DeepMap(obj)
    rebuilt = DeepMap.from_entries(deep.entries())
    assert rebuilt == deep
    assert rebuilt.unpack() == obj


@given(obj=_OBJECTS)
def test_entry_count_property(obj: dict[str, Any]) -> None:
    assert len(DeepMap(obj).entries()) == _count_leaves(obj)


@given(obj=_OBJECTS)
def test_entry_order_property(obj: dict[str, Any]) -> None:
    assert [path for path, _ in DeepMap(obj).entries()] == _preorder_paths(obj)


@given(obj=_OBJECTS)
def test_every_entry_path_resolves_property(obj: dict[str, Any]) -> None:
    deep = DeepMap(obj)
    for path, value in deep.entries():
        assert deep.has_path(path)
        assert deep.get_path(path) == value
