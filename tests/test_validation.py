"""Tests for pagesift.extractors.validation."""

from __future__ import annotations

from helpers import find_by_id

from pagesift.extractors.validation import is_valid_content, link_density


def _block(links: int, link_chars: int, plain_chars: int) -> str:
    anchors = "".join(f'<a href="#">{"a" * link_chars}</a>' for _ in range(links))
    return f'<div id="block">{anchors}{"b" * plain_chars}</div>'


# ---------------------------------------------------------------------------
# Length rule
# ---------------------------------------------------------------------------

class TestLengthRule:
    def test_short_text_rejected(self, build):
        node = find_by_id(build('<div id="block">Too short.</div>'), "block")
        assert is_valid_content(node) is False

    def test_exactly_fifty_chars_accepted(self, build):
        node = find_by_id(build(_block(0, 0, 50)), "block")
        assert is_valid_content(node) is True

    def test_forty_nine_chars_rejected(self, build):
        node = find_by_id(build(_block(0, 0, 49)), "block")
        assert is_valid_content(node) is False

    def test_surrounding_whitespace_not_counted(self, build):
        html = f'<div id="block">{" " * 40}{"b" * 45}{" " * 40}</div>'
        node = find_by_id(build(html), "block")
        assert is_valid_content(node) is False

    def test_custom_minimum(self, build):
        node = find_by_id(build(_block(0, 0, 20)), "block")
        assert is_valid_content(node, min_text_length=10) is True


# ---------------------------------------------------------------------------
# Link density
# ---------------------------------------------------------------------------

class TestLinkDensity:
    def test_navigation_block_rejected(self, build):
        # 20 links of 20 chars = 400 of 500 chars -> 0.8
        html = "<nav id='block'>" + "".join(
            f'<a href="/p{i}">{"a" * 20}</a>' for i in range(20)
        ) + "b" * 100 + "</nav>"
        node = find_by_id(build(html), "block")
        assert link_density(node) == 0.8
        assert is_valid_content(node) is False

    def test_half_links_accepted(self, build):
        node = find_by_id(build(_block(1, 50, 50)), "block")
        assert link_density(node) == 0.5
        assert is_valid_content(node) is True

    def test_just_over_half_rejected(self, build):
        node = find_by_id(build(_block(1, 51, 49)), "block")
        assert is_valid_content(node) is False

    def test_no_links(self, build):
        node = find_by_id(build(_block(0, 0, 80)), "block")
        assert link_density(node) == 0.0

    def test_empty_block_has_zero_density(self, build):
        node = find_by_id(build('<div id="block"></div>'), "block")
        assert link_density(node) == 0.0
        assert is_valid_content(node) is False


# ---------------------------------------------------------------------------
# Monotonicity
# ---------------------------------------------------------------------------

class TestMonotonicity:
    def test_accepted_blocks_meet_both_rules(self, build):
        for link_chars in (0, 10, 30, 60, 90):
            for plain_chars in (0, 20, 45, 70, 120):
                node = find_by_id(build(_block(1, link_chars, plain_chars)), "block")
                total = link_chars + plain_chars
                if is_valid_content(node):
                    assert total >= 50
                    assert link_density(node) <= 0.5
                if total < 50:
                    assert is_valid_content(node) is False

    def test_does_not_mutate(self, build):
        root = build(_block(2, 10, 60))
        before = root.text
        is_valid_content(find_by_id(root, "block"))
        assert root.text == before
