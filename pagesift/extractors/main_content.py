"""Main content extraction: strategy chain, validation, cleaning.

    from pagesift.soup import parse_soup
    from pagesift.extractors.main_content import extract_main_content

    result = extract_main_content(parse_soup(html))
    if result.text is not None:
        print(result.method, result.text[:200])
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

from pagesift.extractors.cleaning import clean_text
from pagesift.extractors.strategies import build_strategy_chain, select_content_node
from pagesift.settings import MAX_COMBINED_BLOCKS, MIN_CONTENT_LENGTH, MIN_PARAGRAPHS

if TYPE_CHECKING:
    from pagesift.tree import Node

logger = logging.getLogger(__name__)


class ExtractionResult(NamedTuple):
    text: str | None    # None when nothing passed validation
    method: str | None  # name of the strategy that produced *text*


NO_CONTENT = ExtractionResult(text=None, method=None)


def extract_main_content(
    root: Node,
    *,
    min_content_length: int = MIN_CONTENT_LENGTH,
    min_paragraphs: int = MIN_PARAGRAPHS,
    max_combined_blocks: int = MAX_COMBINED_BLOCKS,
) -> ExtractionResult:
    """Locate the primary readable block under *root* and return its clean text.

    Structural selectors are tried first; the longest-block scorer is the
    last resort.  The tree under *root* is never modified.
    """
    strategies = build_strategy_chain(
        min_content_length=min_content_length,
        min_paragraphs=min_paragraphs,
        max_combined_blocks=max_combined_blocks,
    )
    match = select_content_node(root, strategies)
    if match is None:
        return NO_CONTENT

    node, method = match
    text = clean_text(node)
    logger.debug("extracted %d chars via %s", len(text), method)
    return ExtractionResult(text=text, method=method)
