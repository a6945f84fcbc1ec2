"""Pydantic output schema for an analyzed page."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, field_validator

from pagesift.tree import class_name, element_id

if TYPE_CHECKING:
    from pagesift.tree import Node

_PREVIEW_CHARS = 200
_WHITESPACE_RE = re.compile(r"\s+")


class CommentSection(BaseModel):
    """Serializable summary of one detected comment container."""

    tag: str
    element_id: str = ""
    classes: str = ""
    text_length: int = 0
    preview: str = ""

    @classmethod
    def from_node(cls, node: Node) -> CommentSection:
        text = _WHITESPACE_RE.sub(" ", node.text).strip()
        return cls(
            tag=node.tag,
            element_id=element_id(node),
            classes=class_name(node),
            text_length=len(text),
            preview=text[:_PREVIEW_CHARS],
        )


class PageSchema(BaseModel):
    """Canonical output schema for one analyzed page."""

    # Identity
    url: str = ""

    # Metadata
    title: str = ""
    description: str | None = None
    favicon: str | None = None

    # Content
    main_content: str | None = None
    extraction_method: str | None = None  # strategy name, e.g. "article"
    comment_sections: list[CommentSection] = Field(default_factory=list)

    # Provenance
    extracted_at: str = ""

    @field_validator("url", mode="before")
    @classmethod
    def strip_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v or ""

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v or ""

    @property
    def has_content(self) -> bool:
        return self.main_content is not None
