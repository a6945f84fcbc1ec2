"""Extraction sub-package: deterministic, template-agnostic heuristics."""

from .cleaning import clean_text
from .comments import find_comment_sections
from .main_content import ExtractionResult, extract_main_content
from .metadata import extract_metadata
from .scoring import find_longest_text_block
from .strategies import select_content_node
from .validation import is_valid_content, link_density

__all__ = [
    "ExtractionResult",
    "clean_text",
    "extract_main_content",
    "extract_metadata",
    "find_comment_sections",
    "find_longest_text_block",
    "is_valid_content",
    "link_density",
    "select_content_node",
]
