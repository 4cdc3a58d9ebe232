"""cleanread.extractor - turn a page into a sanitized, storable Article.

Basic usage::

    from cleanread import extract_article

    article = extract_article(html, url="https://example.com/news/story")
    print(article.title)
    print(article.content_html)   # safe to insert into the reader page

    # As a plain dict
    data = article.model_dump()

Low-level access::

    from cleanread.extractors.main_content import extract_content
    from cleanread.sanitize import sanitize_html

    result = extract_content(html)           # ExtractionResult | None
    safe = sanitize_html(result.content)
"""

from __future__ import annotations

import logging
import time

from bs4 import BeautifulSoup

from cleanread.extractors.main_content import extract_content
from cleanread.items import Article
from cleanread.sanitize import sanitize_html

logger = logging.getLogger(__name__)

_ID_PREFIX = "art_"
_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


# ---------------------------------------------------------------------------
# Public exception
# ---------------------------------------------------------------------------

class ExtractionFailed(RuntimeError):
    """Raised when no readable article can be extracted from a page.

    Attributes:
        url -- the page URL (empty if unknown)
    """

    def __init__(
        self,
        message: str = "Could not find readable content on this page. Try a different page.",
        url: str = "",
    ) -> None:
        super().__init__(message)
        self.url = url


# ---------------------------------------------------------------------------
# Article id
# ---------------------------------------------------------------------------

def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))


def article_id_from_url(url: str) -> str:
    """Return a short, stable id for *url*.

    Uses the classic 31-multiplier string hash over UTF-16 code units,
    wrapped to a signed 32-bit integer, so ids match those already stored
    by the browser extension.  Collisions are tolerated.
    """
    h = 0
    encoded = url.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(encoded), 2):
        unit = encoded[i] | (encoded[i + 1] << 8)
        h = ((h << 5) - h + unit) & 0xFFFFFFFF
    if h & 0x80000000:
        h -= 1 << 32
    return _ID_PREFIX + _to_base36(abs(h))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_article(document: str | bytes | BeautifulSoup, url: str = "") -> Article:
    """Extract, sanitize, and assemble an :class:`~cleanread.items.Article`.

    Args:
        document: Raw HTML or a parsed BeautifulSoup tree (not mutated).
        url:      Page URL; used to derive the article id.

    Raises:
        ExtractionFailed: When no candidate was found or its text is too short.
    """
    result = extract_content(document)
    if result is None:
        logger.info("No readable content found for %s", url or "<unknown url>")
        raise ExtractionFailed(url=url)

    return Article(
        id=article_id_from_url(url),
        url=url,
        title=result.title,
        byline=result.byline,
        content_html=sanitize_html(result.content),
        text=result.text_content,
        extracted_at=int(time.time() * 1000),
    )
