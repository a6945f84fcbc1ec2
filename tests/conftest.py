"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from pagesift.query import BACKENDS, build_tree
from pagesift.tree import Node


@pytest.fixture(params=BACKENDS)
def build(request: pytest.FixtureRequest) -> Callable[[str], Node]:
    """Parse HTML with each tree backend in turn."""
    backend = request.param

    def _build(html: str) -> Node:
        return build_tree(html, backend)

    return _build
