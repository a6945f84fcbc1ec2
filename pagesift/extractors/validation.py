"""Content validator: accept or reject a candidate block.

A block passes when its trimmed text is long enough and it is not dominated
by link text (navigation menus, tag clouds, listing pages).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pagesift.settings import MAX_LINK_DENSITY, MIN_TEXT_LENGTH

if TYPE_CHECKING:
    from pagesift.tree import Node


def link_density(node: Node) -> float:
    """Return anchor text length divided by the node's trimmed text length."""
    total = len(node.text.strip())
    if total == 0:
        return 0.0
    link_chars = sum(len(a.text) for a in node.iter_descendants("a"))
    return link_chars / total


def is_valid_content(
    node: Node,
    *,
    min_text_length: int = MIN_TEXT_LENGTH,
    max_link_density: float = MAX_LINK_DENSITY,
) -> bool:
    """Return True if *node* looks like readable prose."""
    if len(node.text.strip()) < min_text_length:
        return False
    return link_density(node) <= max_link_density
