"""Page-level metadata: title, description and favicon.

Priority chain per field:
    title       — og:title → <title> → first <h1>
    description — <meta name="description"> → og:description
    favicon     — <link rel="*icon*"> → /favicon.ico at the site root
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any
from urllib.parse import urljoin, urlparse

from pagesift.tree import iter_elements

if TYPE_CHECKING:
    from pagesift.tree import Node

_WHITESPACE_RE = re.compile(r"\s+")


def _collapse(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def _meta_content(root: Node, *, name: str = "", prop: str = "") -> str:
    for meta in iter_elements(root, "meta"):
        if name and meta.get_attribute("name").lower() != name:
            continue
        if prop and meta.get_attribute("property").lower() != prop:
            continue
        content = _collapse(meta.get_attribute("content"))
        if content:
            return content
    return ""


def _first_text(root: Node, tag: str) -> str:
    for el in iter_elements(root, tag):
        text = _collapse(el.text)
        if text:
            return text
    return ""


def _favicon(root: Node, url: str) -> str | None:
    for link in iter_elements(root, "link"):
        rel = link.get_attribute("rel").lower().split()
        href = link.get_attribute("href").strip()
        if href and any("icon" in r for r in rel):
            return urljoin(url, href) if url else href

    parsed = urlparse(url)
    if parsed.scheme in ("http", "https") and parsed.netloc:
        return f"{parsed.scheme}://{parsed.netloc}/favicon.ico"
    return None


def extract_metadata(root: Node, url: str = "") -> dict[str, Any]:
    """Return ``{"title", "description", "favicon"}`` for the page under *root*."""
    title = (
        _meta_content(root, prop="og:title")
        or _first_text(root, "title")
        or _first_text(root, "h1")
    )
    description = (
        _meta_content(root, name="description")
        or _meta_content(root, prop="og:description")
    )
    return {
        "title": title,
        "description": description or None,
        "favicon": _favicon(root, url),
    }
