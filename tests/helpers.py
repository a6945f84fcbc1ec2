"""Small tree helpers shared by the test modules."""

from __future__ import annotations

from pagesift.tree import Node


def find_by_id(root: Node, value: str) -> Node:
    """Return the first element under *root* whose id is *value*."""
    for el in root.iter_descendants():
        if el.get_attribute("id") == value:
            return el
    raise LookupError(value)


def snapshot(root: Node) -> tuple[str, int]:
    """Text and element count, for asserting a tree was left untouched."""
    return root.text, sum(1 for _ in root.iter_descendants())
