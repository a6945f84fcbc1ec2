"""Tests for pagesift.extractors.metadata."""

from __future__ import annotations

from pagesift.extractors.metadata import extract_metadata

FULL_HEAD = """<!DOCTYPE html>
<html lang="en">
<head>
  <title>  Fallback   Title </title>
  <meta property="og:title" content="Open Graph Title">
  <meta name="description" content="A short summary.">
  <meta property="og:description" content="OG summary.">
  <link rel="shortcut icon" href="/static/fav.png">
</head>
<body><h1>Heading</h1><p>Body</p></body>
</html>"""


class TestTitle:
    def test_og_title_preferred(self, build):
        assert extract_metadata(build(FULL_HEAD))["title"] == "Open Graph Title"

    def test_title_tag_whitespace_collapsed(self, build):
        html = FULL_HEAD.replace('<meta property="og:title" content="Open Graph Title">', "")
        assert extract_metadata(build(html))["title"] == "Fallback Title"

    def test_h1_fallback(self, build):
        html = "<html><body><h1>  Only   heading </h1></body></html>"
        assert extract_metadata(build(html))["title"] == "Only heading"

    def test_no_title(self, build):
        assert extract_metadata(build("<p>x</p>"))["title"] == ""


class TestDescription:
    def test_meta_description_preferred(self, build):
        assert extract_metadata(build(FULL_HEAD))["description"] == "A short summary."

    def test_og_description_fallback(self, build):
        html = FULL_HEAD.replace('<meta name="description" content="A short summary.">', "")
        assert extract_metadata(build(html))["description"] == "OG summary."

    def test_missing_description_is_none(self, build):
        assert extract_metadata(build("<p>x</p>"))["description"] is None


class TestFavicon:
    def test_link_resolved_against_url(self, build):
        meta = extract_metadata(build(FULL_HEAD), "https://example.com/blog/post")
        assert meta["favicon"] == "https://example.com/static/fav.png"

    def test_link_without_url_kept_relative(self, build):
        assert extract_metadata(build(FULL_HEAD))["favicon"] == "/static/fav.png"

    def test_site_root_default(self, build):
        meta = extract_metadata(build("<p>x</p>"), "https://example.com/a/b?c=1")
        assert meta["favicon"] == "https://example.com/favicon.ico"

    def test_no_link_no_url(self, build):
        assert extract_metadata(build("<p>x</p>"))["favicon"] is None

    def test_non_http_url_has_no_default(self, build):
        assert extract_metadata(build("<p>x</p>"), "file:///tmp/page.html")["favicon"] is None
