"""Comment region detector.

Finds containers that likely hold user discussion, independently of the main
content path.  Two passes are unioned:

  keyword pass    — class/id matches a comment keyword (English or Korean);
                    the outermost ancestor shaped like a repeated-item list
                    is reported instead of the matched element itself
  structural pass — any <ul>/<ol>/<div> whose children look like a list of
                    medium-length text items

Only container handles are returned.  Splitting a container into individual
comments (author, text, likes) is left to the caller.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import TYPE_CHECKING

from pagesift.settings import (
    COMMENT_CONTAINER_MIN_CHILDREN,
    COMMENT_CONTAINER_MIN_REPEATS,
    COMMENT_ITEM_MAX_CHARS,
    COMMENT_ITEM_MIN_CHARS,
    COMMENT_KEYWORDS,
    COMMENT_LIST_MIN_ITEMS,
)
from pagesift.tree import class_name, element_id, iter_elements

if TYPE_CHECKING:
    from pagesift.tree import Node

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Compiled patterns (evaluated once at import time)
# ---------------------------------------------------------------------------

_KEYWORD_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(re.escape(keyword), re.IGNORECASE) for keyword in COMMENT_KEYWORDS
)

_LIST_TAGS: tuple[str, ...] = ("ul", "ol", "div")


def matches_comment_keyword(node: Node) -> bool:
    """True if the node's class or id contains a comment keyword."""
    classes = class_name(node)
    node_id = element_id(node)
    return any(p.search(classes) or p.search(node_id) for p in _KEYWORD_PATTERNS)


def looks_like_comment_container(node: Node) -> bool:
    """At least two children, one tag name repeated three or more times."""
    children = node.children
    if len(children) < COMMENT_CONTAINER_MIN_CHILDREN:
        return False
    counts = Counter(child.tag for child in children)
    return max(counts.values()) >= COMMENT_CONTAINER_MIN_REPEATS


def looks_like_comment_list(node: Node) -> bool:
    """At least three children carrying a medium amount of text."""
    items = node.children
    if len(items) < COMMENT_LIST_MIN_ITEMS:
        return False
    valid = 0
    for item in items:
        length = len(item.text.strip())
        if COMMENT_ITEM_MIN_CHARS < length < COMMENT_ITEM_MAX_CHARS:
            valid += 1
    return valid >= COMMENT_LIST_MIN_ITEMS


def _outermost_container(node: Node, root: Node) -> Node:
    """Walk ancestors up to *root* and keep the outermost list-shaped one."""
    container = node
    current = node
    while current != root:
        parent = current.parent
        if parent is None:
            break
        if looks_like_comment_container(parent):
            container = parent
        current = parent
    return container


def find_comment_sections(root: Node) -> list[Node]:
    """Return likely comment containers under *root*, without duplicates.

    Order is first discovery (keyword pass, then structural pass) and carries
    no meaning; callers should treat the result as a set.
    """
    found: dict[Node, None] = {}

    keyword_hits = 0
    for el in iter_elements(root):
        if matches_comment_keyword(el):
            keyword_hits += 1
            found.setdefault(_outermost_container(el, root), None)

    structural_hits = 0
    for el in iter_elements(root, *_LIST_TAGS):
        if looks_like_comment_list(el):
            structural_hits += 1
            found.setdefault(el, None)

    logger.debug(
        "comment detection: %d keyword hits, %d list-shaped nodes, %d sections",
        keyword_hits, structural_hits, len(found),
    )
    return list(found)
