"""Title and byline extraction.

Priority chains (highest → lowest):
    title:  Open Graph title → first <h1> → <title> → "Untitled"
    byline: rel=author → .author → .byline → .post-author → <meta name="author">
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from cleanread import settings
from cleanread.extractors.selectors import attr_str

logger = logging.getLogger(__name__)

UNTITLED = "Untitled"

_BYLINE_SELECTORS: tuple[str, ...] = (
    '[rel="author"]',
    ".author",
    ".byline",
    ".post-author",
    'meta[name="author"]',
)


def _first(*values: str | None) -> str | None:
    """Return the first non-empty value."""
    for v in values:
        if v:
            return v
    return None


def _og_title(soup: BeautifulSoup) -> str | None:
    tag = soup.find("meta", attrs={"property": "og:title"})
    if tag and isinstance(tag, Tag):
        return attr_str(tag.get("content")).strip() or None
    return None


def _text_of(tag: Tag | None) -> str | None:
    if tag is None or not isinstance(tag, Tag):
        return None
    return tag.get_text().strip() or None


def extract_title(soup: BeautifulSoup) -> str:
    return _first(
        _og_title(soup),
        _text_of(soup.find("h1")),
        _text_of(soup.find("title")),
    ) or UNTITLED


def extract_byline(soup: BeautifulSoup) -> str | None:
    for selector in _BYLINE_SELECTORS:
        el = soup.select_one(selector)
        if el is None:
            continue
        value = attr_str(el.get("content")) or el.get_text()
        value = value.strip()
        if value:
            return value
    return None


def extract_metadata(html: str = "", soup: BeautifulSoup | None = None) -> dict:
    """Extract title and byline from *html*.

    Args:
        html: Raw HTML string.
        soup: Pre-parsed BeautifulSoup object.  When provided the HTML is
              not re-parsed.

    Returns a dict with keys ``title`` and ``byline``.
    """
    if soup is None:
        try:
            soup = BeautifulSoup(html, settings.HTML_PARSER)
        except Exception as exc:
            logger.debug("Metadata parse failed: %s", exc)
            return {"title": UNTITLED, "byline": None}

    return {"title": extract_title(soup), "byline": extract_byline(soup)}
