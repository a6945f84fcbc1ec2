"""Longest-block scorer: fallback when no structural selector matches.

Every ``<div>``, ``<section>`` and ``<article>`` with enough paragraphs is
scored by its paragraph text.  A single block long enough on its own wins
outright; otherwise the top few blocks are merged into one synthesized
container so modular layouts still yield a meaningful excerpt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pagesift.settings import MAX_COMBINED_BLOCKS, MIN_CONTENT_LENGTH, MIN_PARAGRAPHS
from pagesift.tree import iter_elements

if TYPE_CHECKING:
    from pagesift.tree import Node

logger = logging.getLogger(__name__)

_CONTAINER_TAGS: tuple[str, ...] = ("div", "section", "article")


@dataclass
class Candidate:
    """A scored container, alive for one scoring pass only."""

    node: Node
    score: float
    text_length: int


def score_candidates(root: Node, *, min_paragraphs: int = MIN_PARAGRAPHS) -> list[Candidate]:
    """Score container elements under *root*, best first.

    Ties keep document order.
    """
    candidates: list[Candidate] = []
    for el in iter_elements(root, *_CONTAINER_TAGS):
        paragraphs = list(el.iter_descendants("p"))
        count = len(paragraphs)
        if count < min_paragraphs:
            continue
        total_text = sum(len(p.text) for p in paragraphs)
        # Reduces to total_text; kept factored so paragraph count can be weighted
        score = count * (total_text / count)
        candidates.append(Candidate(node=el, score=score, text_length=total_text))

    # sorted() is stable, so equal scores stay in document order
    return sorted(candidates, key=lambda c: c.score, reverse=True)


def find_longest_text_block(
    root: Node,
    *,
    min_content_length: int = MIN_CONTENT_LENGTH,
    min_paragraphs: int = MIN_PARAGRAPHS,
    max_combined_blocks: int = MAX_COMBINED_BLOCKS,
) -> Node | None:
    """Return the best paragraph-dense block, combining the top few if needed.

    Returns None when no container has at least *min_paragraphs* paragraphs.
    """
    candidates = score_candidates(root, min_paragraphs=min_paragraphs)
    if not candidates:
        logger.debug("longest-block: no container with >= %d paragraphs", min_paragraphs)
        return None

    top = candidates[0]
    if top.text_length >= min_content_length:
        logger.debug("longest-block: top block alone has %d chars", top.text_length)
        return top.node

    selected: list[Node] = []
    combined_length = 0
    for candidate in candidates[:max_combined_blocks]:
        selected.append(candidate.node)
        combined_length += candidate.text_length
        if combined_length >= min_content_length:
            break

    logger.debug(
        "longest-block: %d candidates, combining %d blocks (%d chars)",
        len(candidates), len(selected), combined_length,
    )
    if len(selected) > 1:
        return selected[0].new_container(selected)
    return selected[0]
