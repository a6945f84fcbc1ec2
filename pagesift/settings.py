"""Tunable thresholds and process-wide configuration for pagesift.

Scorer thresholds can be overridden per call (or per :class:`PageSifter`);
everything else is read once at import time.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Longest-block scorer
# ---------------------------------------------------------------------------
# Stop combining blocks once their paragraph text reaches this many characters
MIN_CONTENT_LENGTH = 25_600

# Containers with fewer descendant <p> tags are not scored
MIN_PARAGRAPHS = 2

# Hard cap on blocks merged into one synthesized container
MAX_COMBINED_BLOCKS = 3

# ---------------------------------------------------------------------------
# Content validator
# ---------------------------------------------------------------------------
MIN_TEXT_LENGTH = 50
MAX_LINK_DENSITY = 0.5

# ---------------------------------------------------------------------------
# Comment region detector
# ---------------------------------------------------------------------------
COMMENT_KEYWORDS: tuple[str, ...] = (
    "comment",
    "reply",
    "discussion",
    "review",
    "feedback",
    "댓글",
    "답글",
    "의견",
    "리뷰",
    "토론",
)

COMMENT_CONTAINER_MIN_CHILDREN = 2
COMMENT_CONTAINER_MIN_REPEATS = 3

COMMENT_LIST_MIN_ITEMS = 3
# Exclusive bounds on the trimmed text length of one list item
COMMENT_ITEM_MIN_CHARS = 20
COMMENT_ITEM_MAX_CHARS = 5_000

# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
DEFAULT_BACKEND = "soup"  # "soup" | "lxml"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
