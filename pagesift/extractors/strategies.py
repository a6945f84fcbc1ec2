"""Strategy chain: ordered content-locating rules, first accepted match wins.

Tiers, tried in order:
  1. semantic landmarks   — <article>, <main>, [role="main"]
  2. class conventions    — .article-body, .post-content, .entry-content,
                            [class*="article"], [class*="content"]
  3. id conventions       — #article, #content, [id*="article"], [id*="content"]
  4. longest block        — paragraph-density scorer (see scoring.py)

Each rule picks the first matching element in document order.  If that
element fails validation the chain moves on to the next rule; there is no
scoring between structural matches.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, NamedTuple

from pagesift.extractors.scoring import find_longest_text_block
from pagesift.extractors.validation import is_valid_content
from pagesift.settings import MAX_COMBINED_BLOCKS, MIN_CONTENT_LENGTH, MIN_PARAGRAPHS
from pagesift.tree import class_name, element_id, has_class, iter_elements

if TYPE_CHECKING:
    from pagesift.tree import Node


logger = logging.getLogger(__name__)


class Strategy(NamedTuple):
    name: str
    select: Callable[[Node], Node | None]


# ---------------------------------------------------------------------------
# Rule builders
# ---------------------------------------------------------------------------

def _first(root: Node, predicate: Callable[[Node], bool], *tags: str) -> Node | None:
    return next((el for el in iter_elements(root, *tags) if predicate(el)), None)


def _by_tag(tag: str) -> Callable[[Node], Node | None]:
    return lambda root: _first(root, lambda el: True, tag)


def _by_attr(name: str, value: str) -> Callable[[Node], Node | None]:
    return lambda root: _first(root, lambda el: el.get_attribute(name) == value)


def _by_class_token(token: str) -> Callable[[Node], Node | None]:
    return lambda root: _first(root, lambda el: has_class(el, token))


def _by_class_substring(fragment: str) -> Callable[[Node], Node | None]:
    return lambda root: _first(root, lambda el: fragment in class_name(el))


def _by_id(value: str) -> Callable[[Node], Node | None]:
    return lambda root: _first(root, lambda el: element_id(el) == value)


def _by_id_substring(fragment: str) -> Callable[[Node], Node | None]:
    return lambda root: _first(root, lambda el: fragment in element_id(el))


STRUCTURAL_STRATEGIES: tuple[Strategy, ...] = (
    # Tier 1: semantic HTML5
    Strategy("article", _by_tag("article")),
    Strategy("main", _by_tag("main")),
    Strategy("role_main", _by_attr("role", "main")),
    # Tier 2: class-name conventions
    Strategy("class_article_body", _by_class_token("article-body")),
    Strategy("class_post_content", _by_class_token("post-content")),
    Strategy("class_entry_content", _by_class_token("entry-content")),
    Strategy("class_contains_article", _by_class_substring("article")),
    Strategy("class_contains_content", _by_class_substring("content")),
    # Tier 3: id conventions
    Strategy("id_article", _by_id("article")),
    Strategy("id_content", _by_id("content")),
    Strategy("id_contains_article", _by_id_substring("article")),
    Strategy("id_contains_content", _by_id_substring("content")),
)


def build_strategy_chain(
    *,
    min_content_length: int = MIN_CONTENT_LENGTH,
    min_paragraphs: int = MIN_PARAGRAPHS,
    max_combined_blocks: int = MAX_COMBINED_BLOCKS,
) -> tuple[Strategy, ...]:
    """Return the structural rules followed by a tuned longest-block scorer."""
    longest = functools.partial(
        find_longest_text_block,
        min_content_length=min_content_length,
        min_paragraphs=min_paragraphs,
        max_combined_blocks=max_combined_blocks,
    )
    return (*STRUCTURAL_STRATEGIES, Strategy("longest_block", longest))


def select_content_node(
    root: Node,
    strategies: tuple[Strategy, ...] | None = None,
) -> tuple[Node, str] | None:
    """Return ``(node, strategy_name)`` for the first validated match, else None."""
    if strategies is None:
        strategies = build_strategy_chain()

    for strategy in strategies:
        node = strategy.select(root)
        if node is None:
            continue
        if is_valid_content(node):
            logger.debug("strategy %s matched <%s>", strategy.name, node.tag)
            return node, strategy.name
        logger.debug("strategy %s matched <%s> but failed validation", strategy.name, node.tag)

    logger.debug("strategy chain exhausted without a valid match")
    return None
