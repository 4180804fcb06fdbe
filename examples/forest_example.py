"""Minimal example for grouping flat records into a forest."""

import logging

from deep_map import make_tree


def main() -> None:
    """Link a small category table into trees and show skipped rows."""
    logging.basicConfig(level=logging.INFO)
    rows = [
        {"id": 1, "parent": None, "name": "Books"},
        {"id": 2, "parent": 1, "name": "Fiction"},
        {"id": 3, "parent": 1, "name": "Science"},
        {"id": None, "parent": 1, "name": "Unfiled"},
        {"id": 4, "parent": 3, "name": "Physics"},
    ]
    forest = make_tree(rows, node_id="id", parent_id="parent", store_into="subcategories")
    for root in forest.roots:
        print(root["name"], [child["name"] for child in root["subcategories"]])
    for skipped in forest.skipped:
        print("skipped row", skipped.index, "-", skipped.reason)


if __name__ == "__main__":
    main()
