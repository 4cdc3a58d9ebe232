"""Main content extraction: distractor removal followed by a selection cascade.

Strategy 1: a single <article> landmark
Strategy 2: the longest of several <article> landmarks
Strategy 3: a <main> / [role="main"] landmark
Strategy 4: paragraph scoring over every <div> / <section>
"""

from __future__ import annotations

import copy
import logging

from bs4 import BeautifulSoup, Tag

from cleanread import settings
from cleanread.extractors.distractors import remove_structural_noise, remove_text_distractors
from cleanread.extractors.metadata import extract_metadata
from cleanread.extractors.selectors import element_role
from cleanread.items import ExtractionResult

logger = logging.getLogger(__name__)

_CANDIDATE_TAGS: list[str] = ["div", "section"]


def _text_length(tag: Tag) -> int:
    return len(tag.get_text())


def _clone_document(document: str | bytes | BeautifulSoup) -> BeautifulSoup | None:
    """Return a private tree for *document*; the caller's tree is never touched."""
    try:
        if isinstance(document, BeautifulSoup):
            return copy.copy(document)
        if isinstance(document, Tag):
            document = str(document)
        return BeautifulSoup(document, settings.HTML_PARSER)
    except Exception as exc:
        logger.debug("Document parse failed: %s", exc)
        return None


# ---------------------------------------------------------------------------
# Candidate scoring
# ---------------------------------------------------------------------------

def _depth(tag: Tag) -> int:
    """Count *tag* and each of its ancestor elements up to <html>."""
    depth = 0
    node: Tag | None = tag
    while node is not None and not isinstance(node, BeautifulSoup):
        depth += 1
        node = node.parent
    return depth


def score_candidates(soup: BeautifulSoup) -> list[tuple[int, Tag]]:
    """Score every <div>/<section> in document order.

    Score = total length of descendant paragraphs longer than
    ``settings.PARAGRAPH_MIN_TEXT_LENGTH`` minus ``settings.DEPTH_PENALTY``
    per nesting level.
    """
    paragraph_lengths: dict[int, int] = {}
    for p in soup.find_all("p"):
        paragraph_lengths[id(p)] = len(p.get_text().strip())

    scored: list[tuple[int, Tag]] = []
    for el in soup.find_all(_CANDIDATE_TAGS):
        score = 0
        for p in el.find_all("p"):
            length = paragraph_lengths.get(id(p), 0)
            if length > settings.PARAGRAPH_MIN_TEXT_LENGTH:
                score += length
        score -= _depth(el) * settings.DEPTH_PENALTY
        scored.append((score, el))
    return scored


def _best_scored_candidate(soup: BeautifulSoup) -> Tag | None:
    best: Tag | None = None
    best_score = 0
    for score, el in score_candidates(soup):
        if score > best_score:
            best_score, best = score, el
    if best is not None:
        logger.debug("Best scored candidate <%s> score=%d", best.name, best_score)
    return best


# ---------------------------------------------------------------------------
# Selection cascade
# ---------------------------------------------------------------------------

def find_article_content(soup: BeautifulSoup) -> tuple[Tag, str] | None:
    """Select the element holding the article body.

    Returns ``(element, method)`` where method is one of ``"article"``,
    ``"longest_article"``, ``"main"`` or ``"scored"``, or None when no
    candidate qualifies.
    """
    articles = soup.find_all("article")
    if len(articles) == 1:
        return articles[0], "article"

    if len(articles) > 1:
        best = max(articles, key=_text_length)
        if _text_length(best) > settings.LANDMARK_MIN_TEXT_LENGTH:
            return best, "longest_article"

    main = soup.find(lambda t: t.name == "main" or element_role(t) == "main")
    if main is not None and _text_length(main) > settings.LANDMARK_MIN_TEXT_LENGTH:
        return main, "main"

    scored = _best_scored_candidate(soup)
    if scored is not None:
        return scored, "scored"
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_content(document: str | bytes | BeautifulSoup) -> ExtractionResult | None:
    """Extract the readable article from *document*.

    *document* may be raw HTML or a parsed BeautifulSoup tree; a tree is
    deep-copied first, so the caller's document is never mutated.

    Returns an :class:`~cleanread.items.ExtractionResult`, or None when no
    candidate is found or the selected text is shorter than
    ``settings.MIN_TEXT_LENGTH`` characters.
    """
    soup = _clone_document(document)
    if soup is None or soup.find(True) is None:
        return None

    structural = remove_structural_noise(soup)
    textual = remove_text_distractors(soup)
    logger.debug("Removed %d structural and %d text-labelled distractors", structural, textual)

    found = find_article_content(soup)
    if found is None:
        logger.debug("No content candidate found")
        return None
    element, method = found

    text_content = element.get_text().strip()
    if len(text_content) < settings.MIN_TEXT_LENGTH:
        logger.debug(
            "Selected <%s> via %s has only %d characters of text",
            element.name, method, len(text_content),
        )
        return None

    meta = extract_metadata(soup=soup)
    logger.debug("Selected <%s> via %s (%d characters)", element.name, method, len(text_content))
    return ExtractionResult(
        title=meta["title"],
        byline=meta["byline"],
        content=element.decode_contents(),
        text_content=text_content,
        excerpt=text_content[: settings.EXCERPT_LENGTH],
    )
