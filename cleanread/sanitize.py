"""Allowlist HTML sanitizer.

Keeps only the tags in :data:`ALLOWED_TAGS` and, per tag, the attributes in
:data:`ALLOWED_ATTRS`.  Disallowed elements are unwrapped (their children
stay in place), so content survives while the wrapper's semantics go.

The allowlist is shared with previously cached sanitized content; do not
change it casually.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Tag
from bs4.element import PreformattedString

from cleanread import settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Policy
# ---------------------------------------------------------------------------

ALLOWED_TAGS: frozenset[str] = frozenset(
    {
        "p", "br", "hr", "h1", "h2", "h3", "h4", "h5", "h6",
        "ul", "ol", "li", "blockquote", "pre", "code",
        "em", "strong", "b", "i", "u", "sub", "sup", "mark",
        "a", "img", "figure", "figcaption", "table", "thead",
        "tbody", "tr", "th", "td", "span", "div", "section",
    },
)

ALLOWED_ATTRS: dict[str, frozenset[str]] = {
    "a": frozenset({"href", "title"}),
    "img": frozenset({"src", "alt", "title", "width", "height"}),
    "td": frozenset({"colspan", "rowspan"}),
    "th": frozenset({"colspan", "rowspan"}),
}

# Removed with their contents: raw-text elements hold code, not content.
_DROP_WITH_CONTENTS: frozenset[str] = frozenset({"script", "style", "template"})

# Browsers ignore ASCII whitespace and control characters inside a URL
# scheme, so "java\tscript:" still executes.
_URL_NOISE_RE = re.compile(r"[\x00-\x20\x7f]+")

_SCRIPT_SCHEME = "javascript:"
_SAFE_HREF = "#"


def is_script_url(value: str) -> bool:
    """Return True if *value* is a ``javascript:`` URL."""
    return _URL_NOISE_RE.sub("", value).lower().startswith(_SCRIPT_SCHEME)


def _clean_attributes(el: Tag) -> None:
    allowed = ALLOWED_ATTRS.get(el.name, frozenset())
    for name in list(el.attrs):
        if name not in allowed:
            del el.attrs[name]

    href = el.get("href")
    if href is not None and is_script_url(str(href)):
        el["href"] = _SAFE_HREF
    src = el.get("src")
    if src is not None and is_script_url(str(src)):
        del el.attrs["src"]


def _clean_tree(soup: BeautifulSoup) -> None:
    """Sanitize every node under *soup* in place.

    Elements are visited in reverse document order, so a disallowed element
    is unwrapped only after its descendants are clean.  The walk is
    iterative, so nesting depth is not limited by the recursion limit.
    """
    for node in soup.find_all(string=lambda s: isinstance(s, PreformattedString)):
        # Comments, CDATA, doctypes, processing instructions
        node.extract()

    for el in reversed(soup.find_all(True)):
        if el.name not in ALLOWED_TAGS:
            if el.name in _DROP_WITH_CONTENTS:
                el.decompose()
            else:
                el.unwrap()
            continue
        _clean_attributes(el)


def sanitize_html(dirty_html: str) -> str:
    """Return *dirty_html* reduced to the allowlisted tag/attribute subset.

    The result is a fixed point: sanitizing it again returns it unchanged.
    Never raises: input that cannot be parsed yields an empty string.
    """
    if not dirty_html:
        return ""
    try:
        soup = BeautifulSoup(dirty_html, settings.FRAGMENT_PARSER)
        _clean_tree(soup)
        # Removal and unwrapping can leave whitespace-only strings side by
        # side; the parser collapses such runs, so reparse once to settle them.
        cleaned = soup.decode_contents()
        return BeautifulSoup(cleaned, settings.FRAGMENT_PARSER).decode_contents()
    except Exception as exc:
        logger.debug("Sanitization failed, returning empty output: %s", exc)
        return ""
