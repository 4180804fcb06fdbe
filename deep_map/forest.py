"""Grouping of flat parent/child records into a rooted forest."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SkippedRecord:
    """A record left out of the forest, with its position in the input."""

    index: int
    record: Mapping[Hashable, Any]
    reason: str


@dataclass(frozen=True, slots=True)
class Forest:
    """Top-level records of a forest plus the records that were skipped."""

    roots: list[dict[Hashable, Any]] = field(default_factory=list)
    skipped: list[SkippedRecord] = field(default_factory=list)


def make_tree(
    records: Iterable[Mapping[Hashable, Any]],
    *,
    node_id: Hashable,
    parent_id: Hashable,
    store_into: str = "children",
) -> Forest:
    """Link flat records into trees through their parent identifiers.

    Every record with an identifier under ``node_id`` is shallow-copied and
    given an empty list under ``store_into``. Each copy whose ``parent_id``
    names another known record is appended to that record's children, in
    input order; the rest become roots, including records that name
    themselves as parent. Records without an identifier (key
    missing or ``None``) are skipped, reported in :attr:`Forest.skipped` and
    logged, and never appear in the output.

    The input records are not modified. When identifiers repeat, the last
    record with a given identifier wins and keeps the position of the
    first one.

    >>> forest = make_tree(
    ...     [{"id": 1, "parent": None}, {"id": 2, "parent": 1}],
    ...     node_id="id",
    ...     parent_id="parent",
    ... )
    >>> forest.roots
    [{'id': 1, 'parent': None, 'children': [{'id': 2, 'parent': 1, 'children': []}]}]
    """
    nodes: dict[Hashable, dict[Hashable, Any]] = {}
    skipped: list[SkippedRecord] = []

    for index, record in enumerate(records):
        identifier = record.get(node_id)
        if identifier is None:
            reason = f"record is missing {node_id!r}"
            logger.warning("Skipping record %d: %s", index, reason)
            skipped.append(SkippedRecord(index=index, record=record, reason=reason))
            continue
        nodes[identifier] = {**record, store_into: []}

    roots: list[dict[Hashable, Any]] = []
    for identifier, node in nodes.items():
        parent = node.get(parent_id)
        if parent is not None and parent != identifier and parent in nodes:
            nodes[parent][store_into].append(node)
        else:
            roots.append(node)

    return Forest(roots=roots, skipped=skipped)
