"""Distractor removal: structural noise, text-labelled noise, related-link blocks.

All functions mutate the given tree in place and never raise on unexpected
structure; a selector that matches nothing is simply a no-op.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from cleanread import settings
from cleanread.extractors.selectors import NoiseSelector, class_tokens, element_role, matches_any

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Structural noise
# ---------------------------------------------------------------------------

NOISE_SELECTORS: tuple[NoiseSelector, ...] = (
    # Non-content and embedded/executable elements
    NoiseSelector.tag("script"),
    NoiseSelector.tag("style"),
    NoiseSelector.tag("noscript"),
    NoiseSelector.tag("template"),
    NoiseSelector.tag("iframe"),
    NoiseSelector.tag("object"),
    NoiseSelector.tag("embed"),
    NoiseSelector.tag("svg"),
    NoiseSelector.tag("canvas"),
    NoiseSelector.tag("button"),
    NoiseSelector.tag("input"),
    NoiseSelector.tag("select"),
    NoiseSelector.tag("textarea"),
    # Landmarks by tag
    NoiseSelector.tag("nav"),
    NoiseSelector.tag("header"),
    NoiseSelector.tag("footer"),
    NoiseSelector.tag("aside"),
    # Landmarks by ARIA role
    NoiseSelector.role("banner"),
    NoiseSelector.role("navigation"),
    NoiseSelector.role("complementary"),
    NoiseSelector.role("contentinfo"),
    NoiseSelector.role("search"),
    NoiseSelector.role("dialog"),
    NoiseSelector.role("alertdialog"),
    # Layout chrome identified by exact class token
    NoiseSelector.class_token("nav"),
    NoiseSelector.class_token("header"),
    NoiseSelector.class_token("footer"),
    NoiseSelector.class_token("menu"),
    # Ads
    NoiseSelector.word("ad"),
    NoiseSelector.word("ads"),
    NoiseSelector.class_contains("advert"),
    NoiseSelector.class_contains("adsbygoogle"),
    NoiseSelector.class_contains("sponsor"),
    NoiseSelector.class_contains("promo"),
    NoiseSelector.class_contains("outbrain"),
    NoiseSelector.class_contains("taboola"),
    NoiseSelector.id_prefix("google-ad"),
    NoiseSelector.id_prefix("google_ads"),
    NoiseSelector.id_prefix("div-gpt-ad"),
    NoiseSelector.id_prefix("advert"),
    # Comments
    NoiseSelector.class_contains("comment"),
    NoiseSelector.class_contains("disqus"),
    NoiseSelector.id_prefix("comment"),
    NoiseSelector.id_prefix("disqus"),
    NoiseSelector.id_prefix("respond"),
    # Social / share widgets
    NoiseSelector.class_contains("social"),
    NoiseSelector.class_contains("share"),
    NoiseSelector.class_contains("sharing"),
    NoiseSelector.id_prefix("share"),
    # Related / recommended content
    NoiseSelector.class_contains("related"),
    NoiseSelector.class_contains("recommend"),
    NoiseSelector.class_contains("read-next"),
    NoiseSelector.class_contains("more-stories"),
    NoiseSelector.id_prefix("related"),
    NoiseSelector.id_prefix("recommend"),
    # Newsletter / subscription prompts, cookie notices, popups
    NoiseSelector.class_contains("newsletter"),
    NoiseSelector.class_contains("subscribe"),
    NoiseSelector.class_contains("signup"),
    NoiseSelector.class_contains("cookie"),
    NoiseSelector.class_contains("popup"),
    NoiseSelector.class_contains("modal"),
    NoiseSelector.id_prefix("newsletter"),
    NoiseSelector.id_prefix("cookie"),
    # Page chrome
    NoiseSelector.class_contains("sidebar"),
    NoiseSelector.class_contains("breadcrumb"),
    NoiseSelector.class_contains("pagination"),
    NoiseSelector.id_prefix("sidebar"),
)

# Never removed by class/id patterns: a "has-sidebar" body class must not
# take the whole document with it.
_PROTECTED_TAGS: frozenset[str] = frozenset({"html", "head", "body", "article", "main"})


def remove_structural_noise(soup: BeautifulSoup) -> int:
    """Remove every element matched by :data:`NOISE_SELECTORS`.

    Returns the number of elements removed (descendants of a removed
    element are not counted separately).
    """
    removed = 0
    for el in list(soup.find_all(True)):
        if el.decomposed:
            continue
        protected = el.name in _PROTECTED_TAGS
        if matches_any(el, NOISE_SELECTORS, attributes=not protected):
            el.decompose()
            removed += 1
    return removed


# ---------------------------------------------------------------------------
# Text-labelled noise
# ---------------------------------------------------------------------------

DISTRACTOR_PHRASES: tuple[str, ...] = (
    "advertisement",
    "advertisements",
    "sponsored",
    "sponsored content",
    "paid content",
    "promoted",
    "also read",
    "read also",
    "read more",
    "related articles",
    "related stories",
    "related posts",
    "recommended for you",
    "you may also like",
    "you might also like",
    "more from",
    "sign up for our newsletters",
    "sign up for our newsletter",
    "subscribe to our",
    "get our newsletter",
    "share this article",
    "share this story",
    "follow us on",
)

# Labels short enough to be standalone captions rather than content.
_LABEL_TAGS: list[str] = [
    "h1", "h2", "h3", "h4", "h5", "h6",
    "p", "li", "span", "div", "strong", "b", "em", "label", "figcaption",
]


def _normalized_text(el: Tag) -> str:
    return " ".join(el.get_text().split()).lower()


def match_distractor(text: str) -> str | None:
    """Return the distractor phrase *text* is labelled with, if any.

    *text* must already be trimmed and lower-cased.  Matches on exact
    equality, or on prefix when *text* is shorter than
    ``settings.SHORT_LABEL_LENGTH``.
    """
    if not text:
        return None
    short = len(text) < settings.SHORT_LABEL_LENGTH
    for phrase in DISTRACTOR_PHRASES:
        if text == phrase or (short and text.startswith(phrase)):
            return phrase
    return None


def _triggers_related_removal(phrase: str) -> bool:
    return "also read" in phrase


def remove_text_distractors(soup: BeautifulSoup) -> int:
    """Remove short label elements whose text is a known distractor phrase."""
    removed = 0
    for el in list(soup.find_all(_LABEL_TAGS)):
        if el.decomposed:
            continue
        if el.name == "div" and len(el.find_all(True, recursive=False)) > settings.MAX_LABEL_CHILDREN:
            continue
        phrase = match_distractor(_normalized_text(el))
        if phrase is None:
            continue
        if _triggers_related_removal(phrase):
            remove_related_container(el)
        else:
            el.decompose()
        removed += 1
    return removed


# ---------------------------------------------------------------------------
# Related-content container removal
# ---------------------------------------------------------------------------

_RELATED_CLASS_HINTS: tuple[str, ...] = ("related", "read", "more")
_SUB_HEADINGS: frozenset[str] = frozenset({"h2", "h3", "h4", "h5", "h6"})
_TOP_LANDMARKS: frozenset[str] = frozenset({"article", "main", "body", "html"})


def _is_top_landmark(el: Tag) -> bool:
    if isinstance(el, BeautifulSoup):
        return True
    return el.name in _TOP_LANDMARKS or element_role(el) == "main"


def _looks_like_related_block(el: Tag) -> bool:
    classes = " ".join(class_tokens(el))
    if any(hint in classes for hint in _RELATED_CLASS_HINTS):
        return True
    if len(el.find_all("a")) > 1:
        return True
    return el.find(["ul", "ol"]) is not None


def _ends_related_run(el: Tag) -> bool:
    if el.name in _SUB_HEADINGS:
        return True
    return el.name == "p" and len(el.get_text().strip()) > settings.RELATED_STOP_PARAGRAPH_LENGTH


def _is_related_sibling(el: Tag) -> bool:
    if el.name in ("ul", "ol", "a"):
        return True
    if el.find("a") is not None:
        return True
    return any("related" in token for token in class_tokens(el))


def _remove_related_siblings(label: Tag) -> int:
    removed = 0
    sibling = label.find_next_sibling(True)
    for _ in range(settings.RELATED_SIBLING_SCAN):
        if sibling is None or _ends_related_run(sibling):
            break
        following = sibling.find_next_sibling(True)
        if _is_related_sibling(sibling):
            sibling.decompose()
            removed += 1
        sibling = following
    return removed


def remove_related_container(label: Tag) -> None:
    """Remove the link block introduced by an "also read"-style *label*.

    Looks for a qualifying ancestor first; when none is found (or the walk
    reaches the article/main/body landmark) the label's following siblings
    are scanned instead.  The label itself is always removed.
    """
    ancestor = label.parent
    for _ in range(settings.RELATED_ANCESTOR_DEPTH):
        if not isinstance(ancestor, Tag) or _is_top_landmark(ancestor):
            break
        if _looks_like_related_block(ancestor):
            logger.debug("Removing related-content container <%s>", ancestor.name)
            ancestor.decompose()
            return
        ancestor = ancestor.parent

    removed = _remove_related_siblings(label)
    logger.debug("Removed %d related-content siblings after label", removed)
    label.decompose()
