"""pagesift.query - single-page analysis API.

Basic usage::

    from pagesift.query import parse

    page = parse(html, url="https://example.com/blog/some-post")
    print(page.title)
    print(page.main_content)
    for section in page.comment_sections:
        print(section.tag, section.preview)

    # As a plain dict
    data = parse(html).model_dump()

Low-level access (node handles instead of a serialized schema)::

    from pagesift.query import analyze, build_tree

    root = build_tree(html, backend="lxml")
    analysis = analyze(root)
    for container in analysis.comment_sections:
        for item in container.children:
            ...
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, NamedTuple

from pagesift.extractors.comments import find_comment_sections
from pagesift.extractors.main_content import extract_main_content
from pagesift.extractors.metadata import extract_metadata
from pagesift.items import CommentSection, PageSchema
from pagesift.lxml_tree import parse_lxml
from pagesift.settings import DEFAULT_BACKEND
from pagesift.soup import parse_soup

if TYPE_CHECKING:
    from collections.abc import Callable

    from pagesift.tree import Node

logger = logging.getLogger(__name__)

_BACKENDS: dict[str, Callable[[str], Node]] = {
    "soup": parse_soup,
    "lxml": parse_lxml,
}

BACKENDS: tuple[str, ...] = tuple(_BACKENDS)


class PageAnalysis(NamedTuple):
    main_content: str | None
    method: str | None
    comment_sections: list[Node]


def build_tree(html: str, backend: str = DEFAULT_BACKEND) -> Node:
    """Parse *html* with the named *backend* and return the root element.

    Raises:
        TypeError:  *html* is not a string.
        ValueError: *backend* is not one of :data:`BACKENDS`.
    """
    if not isinstance(html, str):
        raise TypeError(f"html must be str, not {type(html).__name__}")
    try:
        parse_fn = _BACKENDS[backend]
    except KeyError:
        raise ValueError(
            f"unknown backend {backend!r}; expected one of {', '.join(BACKENDS)}",
        ) from None
    return parse_fn(html)


def analyze(root: Node, *, include_comments: bool = True, **tuning: Any) -> PageAnalysis:
    """Run content extraction and comment detection over an existing tree.

    *tuning* is forwarded to
    :func:`~pagesift.extractors.main_content.extract_main_content`
    (``min_content_length``, ``min_paragraphs``, ``max_combined_blocks``).
    """
    result = extract_main_content(root, **tuning)
    sections = find_comment_sections(root) if include_comments else []
    return PageAnalysis(
        main_content=result.text,
        method=result.method,
        comment_sections=sections,
    )


def parse(
    html: str,
    url: str = "",
    *,
    backend: str = DEFAULT_BACKEND,
    include_comments: bool = True,
    **tuning: Any,
) -> PageSchema:
    """Parse pre-fetched HTML and return a :class:`~pagesift.items.PageSchema`.

    No network calls are made; *url* only resolves the favicon and is echoed
    back in the result.
    """
    root = build_tree(html, backend)
    analysis = analyze(root, include_comments=include_comments, **tuning)
    meta = extract_metadata(root, url)

    if analysis.main_content is None:
        logger.info("No main content found%s", f" for {url}" if url else "")

    return PageSchema(
        url=url,
        title=meta["title"],
        description=meta["description"],
        favicon=meta["favicon"],
        main_content=analysis.main_content,
        extraction_method=analysis.method,
        comment_sections=[CommentSection.from_node(n) for n in analysis.comment_sections],
        extracted_at=datetime.now(UTC).isoformat(),
    )


def read_html(path: str | Path) -> str:
    """Read an HTML file as UTF-8, replacing undecodable bytes.

    Raises:
        OSError: the file cannot be read.
    """
    return Path(path).read_text(encoding="utf-8", errors="replace")


def parse_file(path: str | Path, url: str = "", **kwargs: Any) -> PageSchema:
    """:func:`read_html` then :func:`parse`."""
    html = read_html(path)
    return parse(html, url, **kwargs)
