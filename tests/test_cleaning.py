"""Tests for pagesift.extractors.cleaning."""

from __future__ import annotations

from helpers import find_by_id, snapshot

from pagesift.extractors.cleaning import clean_text, is_boilerplate


def _clean(build, inner: str) -> str:
    root = build(f'<html><body><div id="root">{inner}</div></body></html>')
    return clean_text(find_by_id(root, "root"))


# ---------------------------------------------------------------------------
# Removal rules
# ---------------------------------------------------------------------------

class TestRemoval:
    def test_layout_tags_removed(self, build):
        text = _clean(
            build,
            "<header>HEAD</header><nav>NAV</nav><p>Body text</p>"
            "<aside>SIDE</aside><footer>FOOT</footer>",
        )
        assert text == "Body text"

    def test_script_style_noscript_iframe_removed(self, build):
        text = _clean(
            build,
            "<style>p { color: red; }</style><p>Body</p><script>var x = 1;</script>"
            '<noscript>Enable JS</noscript><iframe src="/embed"></iframe>',
        )
        assert text == "Body"

    def test_ad_class_tokens_removed(self, build):
        text = _clean(
            build,
            '<p class="ad">BUY</p><div class="promo advertisement">NOW</div><p>Story</p>',
        )
        assert text == "Story"

    def test_ad_must_be_whole_class_token(self, build):
        text = _clean(build, '<p class="shadow">Shaded</p><p class="ad-free">Free</p>')
        assert text == "ShadedFree"

    def test_banner_substring_removed(self, build):
        assert _clean(build, '<div class="top-banner-wrap">Sale!</div><p>Story</p>') == "Story"

    def test_comment_class_and_id_removed(self, build):
        text = _clean(
            build,
            '<p>Story</p><section id="comments"><p>Nice post</p></section>'
            '<div class="user-comment">First!</div>',
        )
        assert text == "Story"

    def test_nested_matches_removed_once(self, build):
        text = _clean(
            build,
            '<div class="comment"><div class="comment"><p>reply</p></div></div><p>Kept</p>',
        )
        assert text == "Kept"

    def test_deeply_nested_noise_removed(self, build):
        inner = "<div>" * 50 + "<p>Deep</p><aside>noise</aside>" + "</div>" * 50
        assert _clean(build, inner) == "Deep"


# ---------------------------------------------------------------------------
# Behaviour
# ---------------------------------------------------------------------------

class TestBehaviour:
    def test_result_is_trimmed(self, build):
        assert _clean(build, "\n   <p>Body</p>   \n") == "Body"

    def test_root_itself_is_kept(self, build):
        root = build('<html><body><aside id="side"><p>Sidebar prose</p></aside></body></html>')
        assert clean_text(find_by_id(root, "side")) == "Sidebar prose"

    def test_input_tree_untouched(self, build):
        root = build(
            '<html><body><div id="root"><nav>NAV</nav><p>Body</p>'
            '<div class="comment">c</div></div></body></html>',
        )
        before = snapshot(root)
        clean_text(find_by_id(root, "root"))
        assert snapshot(root) == before
        assert "NAV" in root.text

    def test_is_boilerplate(self, build):
        root = build(
            '<html><body><footer id="f"></footer><div id="c" class="comments-area"></div>'
            '<div id="k" class="story"></div></body></html>',
        )
        assert is_boilerplate(find_by_id(root, "f"))
        assert is_boilerplate(find_by_id(root, "c"))
        assert not is_boilerplate(find_by_id(root, "k"))
