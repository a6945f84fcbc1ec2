"""pagesift.parser — High-level PageSifter class.

Bundles backend choice and scorer tuning into a single reusable object.

Usage::

    from pagesift import PageSifter

    sifter = PageSifter()
    page = sifter.parse(html, url="https://example.com/post")

    # Short pages: accept a smaller combined excerpt from the scorer
    sifter = PageSifter(backend="lxml", min_content_length=4_000)
    page = sifter.parse_file("saved/page.html")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pagesift.query import analyze as _analyze
from pagesift.query import parse as _parse
from pagesift.query import parse_file as _parse_file
from pagesift.settings import (
    DEFAULT_BACKEND,
    MAX_COMBINED_BLOCKS,
    MIN_CONTENT_LENGTH,
    MIN_PARAGRAPHS,
)

if TYPE_CHECKING:
    from pathlib import Path

    from pagesift.items import PageSchema
    from pagesift.query import PageAnalysis
    from pagesift.tree import Node


class PageSifter:
    """Configured content and comment extractor.

    Holds no per-page state; one instance can serve any number of pages,
    from any number of threads.

    Args:
        backend:             Tree backend, ``"soup"`` (default) or ``"lxml"``.
        include_comments:    Run comment detection (default ``True``).
        min_content_length:  Scorer stops combining blocks at this many
                             characters (default 25,600).
        min_paragraphs:      Containers with fewer ``<p>`` are not scored.
        max_combined_blocks: Upper bound on blocks merged by the scorer.
    """

    def __init__(
        self,
        backend: str = DEFAULT_BACKEND,
        include_comments: bool = True,
        min_content_length: int = MIN_CONTENT_LENGTH,
        min_paragraphs: int = MIN_PARAGRAPHS,
        max_combined_blocks: int = MAX_COMBINED_BLOCKS,
    ) -> None:
        self._backend = backend
        self._include_comments = include_comments
        self._min_content_length = min_content_length
        self._min_paragraphs = min_paragraphs
        self._max_combined_blocks = max_combined_blocks

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _tuning(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        kwargs.setdefault("include_comments", self._include_comments)
        kwargs.setdefault("min_content_length", self._min_content_length)
        kwargs.setdefault("min_paragraphs", self._min_paragraphs)
        kwargs.setdefault("max_combined_blocks", self._max_combined_blocks)
        return kwargs

    # ------------------------------------------------------------------
    # Public methods
    # ------------------------------------------------------------------

    def analyze(self, root: Node, **kwargs: Any) -> PageAnalysis:
        """Analyze an already-built tree and return node handles.

        Keyword arguments override the constructor's tuning for this call.
        """
        return _analyze(root, **self._tuning(kwargs))

    def parse(self, html: str, url: str = "", **kwargs: Any) -> PageSchema:
        """Parse pre-fetched HTML without any network calls.

        Args:
            html: Raw HTML string to extract content from.
            url:  Original URL of the page, used for the favicon.  Pass an
                  empty string if unknown.

        Returns:
            :class:`~pagesift.items.PageSchema` with content, metadata and
            comment-section summaries.
        """
        kwargs.setdefault("backend", self._backend)
        return _parse(html, url, **self._tuning(kwargs))

    def parse_file(self, path: str | Path, url: str = "", **kwargs: Any) -> PageSchema:
        """Read and parse a saved HTML file."""
        kwargs.setdefault("backend", self._backend)
        return _parse_file(path, url, **self._tuning(kwargs))
