"""BeautifulSoup adapter for the :class:`pagesift.tree.Node` protocol."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from pagesift.tree import Node


class SoupNode:
    """Wraps a :class:`bs4.Tag`.  Equality and hashing follow the wrapped tag."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def __repr__(self) -> str:
        return f"<SoupNode {self._tag.name}>"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SoupNode) and other._tag is self._tag

    def __hash__(self) -> int:
        return id(self._tag)

    @property
    def element(self) -> Tag:
        """The underlying BeautifulSoup tag."""
        return self._tag

    @property
    def tag(self) -> str:
        return (self._tag.name or "").lower()

    @property
    def children(self) -> list[Node]:
        return [SoupNode(c) for c in self._tag.children if isinstance(c, Tag)]

    @property
    def parent(self) -> Node | None:
        parent = self._tag.parent
        # The BeautifulSoup object itself is not an element
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return SoupNode(parent)

    @property
    def text(self) -> str:
        # textContent: script/style/template strings count, comments and
        # doctypes (PreformattedString subclasses) do not
        return "".join(
            s for s in self._tag.descendants
            if isinstance(s, NavigableString) and not isinstance(s, PreformattedString)
        )

    def get_attribute(self, name: str) -> str:
        value = self._tag.get(name)
        if value is None:
            return ""
        if isinstance(value, list):
            return " ".join(str(v) for v in value)
        return str(value)

    def iter_descendants(self, *tags: str) -> Iterator[Node]:
        for el in self._tag.find_all(list(tags) if tags else True):
            if isinstance(el, Tag):
                yield SoupNode(el)

    def clone(self) -> Node:
        # Tag.__copy__ is a deep copy, detached from the parse tree
        return SoupNode(copy.copy(self._tag))

    def remove(self) -> None:
        self._tag.decompose()

    def new_container(self, nodes: Sequence[Node]) -> Node:
        container = BeautifulSoup("", "lxml").new_tag("div")
        for node in nodes:
            if not isinstance(node, SoupNode):
                raise TypeError(f"cannot mix {type(node).__name__} into a soup tree")
            container.append(copy.copy(node.element))
        return SoupNode(container)


def parse_soup(html: str) -> SoupNode:
    """Parse *html* with BeautifulSoup's lxml builder and return the root element."""
    soup = BeautifulSoup(html, "lxml")
    root = soup.find("html")
    if not isinstance(root, Tag):
        # Empty input: lxml produces no <html>; give callers an empty document
        root = soup.new_tag("html")
        soup.append(root)
    return SoupNode(root)
