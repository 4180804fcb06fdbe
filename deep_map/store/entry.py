"""Entry variants stored at each level of a deep map."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Leaf:
    """A terminal value that is never traversed."""

    value: Any


@dataclass(frozen=True, slots=True)
class Node:
    """An internal entry holding the next level of the map."""

    child: dict[str, Entry] = field(default_factory=dict)


Entry = Leaf | Node
Level = dict[str, Entry]
