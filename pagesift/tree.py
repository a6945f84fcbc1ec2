"""pagesift.tree — Minimal read-only document tree contract.

The extraction engine never talks to BeautifulSoup or lxml directly; it walks
any object satisfying :class:`Node`.  Two adapters ship with the package:

    from pagesift.soup import parse_soup        # BeautifulSoup + lxml builder
    from pagesift.lxml_tree import parse_lxml   # lxml.html

Adapters wrap the underlying element and compare/hash by its identity, so
nodes can be collected into sets and dicts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


@runtime_checkable
class Node(Protocol):
    """One element of a parsed document."""

    @property
    def tag(self) -> str:
        """Lower-case tag name."""
        ...

    @property
    def children(self) -> list[Node]:
        """Element children in document order (text and comments excluded)."""
        ...

    @property
    def parent(self) -> Node | None:
        """Parent element, or None at the root element."""
        ...

    @property
    def text(self) -> str:
        """Concatenated text of all descendants, in document order."""
        ...

    def get_attribute(self, name: str) -> str:
        """Return attribute *name* as a string, or ``""`` when absent."""
        ...

    def iter_descendants(self, *tags: str) -> Iterator[Node]:
        """Yield descendants (not self) in document order, optionally by tag."""
        ...

    def clone(self) -> Node:
        """Return a detached deep copy owned by the caller."""
        ...

    def remove(self) -> None:
        """Detach this node from its parent.  Only used on owned clones."""
        ...

    def new_container(self, nodes: Sequence[Node]) -> Node:
        """Return a new detached ``<div>`` holding deep copies of *nodes*."""
        ...


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def iter_elements(root: Node, *tags: str) -> Iterator[Node]:
    """Yield *root* followed by its descendants, optionally filtered by tag."""
    if not tags or root.tag in tags:
        yield root
    yield from root.iter_descendants(*tags)


def class_name(node: Node) -> str:
    return node.get_attribute("class")


def element_id(node: Node) -> str:
    return node.get_attribute("id")


def has_class(node: Node, token: str) -> bool:
    """True if *token* is one of the node's whitespace-separated classes."""
    return token in class_name(node).split()


def text_length(node: Node, *, strip: bool = False) -> int:
    text = node.text
    return len(text.strip() if strip else text)
