"""pagesift - locate the readable content and comment sections of any web page.

Quick usage::

    from pagesift import parse

    page = parse(html, url="https://example.com/blog/some-post")
    print(page.title)
    print(page.main_content)
    print(len(page.comment_sections))

Working with node handles::

    from pagesift import analyze, build_tree

    root = build_tree(html)
    analysis = analyze(root)
    for container in analysis.comment_sections:
        print(container.tag, len(container.children))
"""

from pagesift.extractors import extract_main_content, find_comment_sections
from pagesift.items import CommentSection, PageSchema
from pagesift.parser import PageSifter
from pagesift.query import PageAnalysis, analyze, build_tree, parse, parse_file
from pagesift.tree import Node

__version__ = "0.1.0"
__all__ = [
    "CommentSection",
    "Node",
    "PageAnalysis",
    "PageSchema",
    "PageSifter",
    "analyze",
    "build_tree",
    "extract_main_content",
    "find_comment_sections",
    "parse",
    "parse_file",
]
