"""Strip boilerplate from a selected block and return its plain text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pagesift.tree import class_name, element_id, has_class

if TYPE_CHECKING:
    from pagesift.tree import Node

_BOILERPLATE_TAGS: frozenset[str] = frozenset(
    {
        "script",
        "style",
        "noscript",
        "iframe",
        "nav",
        "header",
        "footer",
        "aside",
    },
)

# Exact class tokens (".ad", ".advertisement")
_AD_CLASS_TOKENS: tuple[str, ...] = ("ad", "advertisement")

# Class attribute substrings
_NOISE_CLASS_SUBSTRINGS: tuple[str, ...] = ("banner", "comment")

# Id attribute substrings; comments are reported separately, not inlined
_NOISE_ID_SUBSTRINGS: tuple[str, ...] = ("comment",)


def is_boilerplate(node: Node) -> bool:
    """Return True if *node* should be dropped from the main content."""
    if node.tag in _BOILERPLATE_TAGS:
        return True
    if any(has_class(node, token) for token in _AD_CLASS_TOKENS):
        return True
    classes = class_name(node)
    if any(fragment in classes for fragment in _NOISE_CLASS_SUBSTRINGS):
        return True
    node_id = element_id(node)
    return any(fragment in node_id for fragment in _NOISE_ID_SUBSTRINGS)


def prune(root: Node) -> Node:
    """Remove boilerplate descendants of *root* in place and return it.

    Walks with an explicit stack and never descends into removed subtrees.
    The root itself is always kept.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        for child in node.children:
            if is_boilerplate(child):
                child.remove()
            else:
                stack.append(child)
    return root


def clean_text(node: Node) -> str:
    """Return the trimmed text of *node* without boilerplate.

    Works on a deep copy; the caller's tree is never touched.
    """
    return prune(node.clone()).text.strip()
