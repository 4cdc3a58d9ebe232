"""CLI entry point: python -m cleanread PAGE.html [options]"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from cleanread import settings

if TYPE_CHECKING:
    from cleanread.items import Article

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cleanread",
        description=(
            "Extract the readable article from a saved web page.\n"
            "Strips ads, navigation and related-link widgets, then sanitizes the result."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", nargs="?", default="-", metavar="PATH",
                        help="HTML file to read, or '-' for stdin (default: -)")
    parser.add_argument("--url", default="", metavar="URL",
                        help="Original page URL, used to derive the article id")
    parser.add_argument("--format", choices=["json", "html", "text"], default="json",
                        metavar="{json,html,text}",
                        help="Output format (default: json)")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help=f"Logging level (default: {settings.LOG_LEVEL})")
    return parser


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8", errors="replace")


def _print_article(article: Article, fmt: str) -> None:
    from rich.console import Console

    console = Console()
    if fmt == "json":
        console.print_json(article.model_dump_json())
    elif fmt == "html":
        # Raw output: rich markup must not reinterpret the article HTML.
        console.print(article.content_html, markup=False, highlight=False, emoji=False, soft_wrap=True)
    else:
        console.print(article.text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=settings.LOG_FORMAT)

    try:
        html = _read_input(args.path)
    except OSError as exc:
        print(f"ERROR: Could not read {args.path}: {exc}", file=sys.stderr)
        return 1

    from cleanread.extractor import ExtractionFailed, extract_article

    try:
        article = extract_article(html, url=args.url)
    except ExtractionFailed as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    _print_article(article, args.format)
    return 0


if __name__ == "__main__":
    sys.exit(main())
