"""CLI entry point: python -m pagesift PATH [options]"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel

from pagesift import settings
from pagesift.query import BACKENDS, parse, read_html

if TYPE_CHECKING:
    from pagesift.items import PageSchema

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagesift",
        description=(
            "Extract the main readable content and comment sections from a saved\n"
            "HTML page.  Prints the result as JSON on stdout."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", metavar="PATH",
                        help="HTML file to analyze, or '-' to read from stdin")
    parser.add_argument("--url", default="", metavar="URL",
                        help="Original page URL (used for the favicon)")
    parser.add_argument("--backend", choices=BACKENDS, default=settings.DEFAULT_BACKEND,
                        help=f"Tree backend (default: {settings.DEFAULT_BACKEND})")
    parser.add_argument("--no-comments", action="store_true", default=False,
                        help="Skip comment-section detection")
    parser.add_argument("--min-content-length", type=int,
                        default=settings.MIN_CONTENT_LENGTH, metavar="N",
                        help=("Characters at which the fallback scorer stops combining "
                              f"blocks (default: {settings.MIN_CONTENT_LENGTH})"))
    parser.add_argument("--indent", type=int, default=None, metavar="N",
                        help="Pretty-print JSON with N spaces (default: compact)")
    parser.add_argument("--summary", action="store_true", default=False,
                        help="Print a short Rich summary panel on stderr")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help=f"Logging level (default: {settings.LOG_LEVEL})")
    return parser


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return read_html(path)


def _print_summary(page: PageSchema, path: str) -> None:
    content = page.main_content
    Console(stderr=True).print(
        Panel.fit(
            f"[bold cyan]pagesift[/bold cyan]\n"
            f"Input:     [green]{path}[/green]\n"
            f"Title:     {page.title or '—'}\n"
            f"Method:    [yellow]{page.extraction_method or 'none'}[/yellow]\n"
            f"Content:   {len(content) if content is not None else 0} chars\n"
            f"Comments:  {len(page.comment_sections)} section(s)",
            border_style="cyan",
            title="[bold]Result[/bold]",
        ),
    )


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=settings.LOG_FORMAT)

    try:
        html = _read_input(args.path)
    except OSError as exc:
        print(f"ERROR: Could not read {args.path}: {exc}", file=sys.stderr)
        return 1

    page = parse(
        html,
        args.url,
        backend=args.backend,
        include_comments=not args.no_comments,
        min_content_length=args.min_content_length,
    )
    logger.debug("parsed %s with backend %s", args.path, args.backend)

    if args.summary:
        _print_summary(page, args.path)
    print(page.model_dump_json(indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
