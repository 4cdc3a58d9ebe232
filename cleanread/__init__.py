"""cleanread - extract the readable article from a noisy web page.

Quick usage::

    from cleanread import extract_article

    article = extract_article(html, url="https://example.com/news/story")
    print(article.title)
    print(article.content_html)

The two stages are also usable on their own::

    from cleanread import extract_content, sanitize_html

    result = extract_content(html)          # None when nothing readable
    if result is not None:
        safe_html = sanitize_html(result.content)
"""

from cleanread.extractor import ExtractionFailed, article_id_from_url, extract_article
from cleanread.extractors.main_content import extract_content
from cleanread.items import Article, ExtractionResult
from cleanread.sanitize import ALLOWED_ATTRS, ALLOWED_TAGS, sanitize_html

__version__ = "0.1.0"
__all__ = [
    "ALLOWED_ATTRS",
    "ALLOWED_TAGS",
    "Article",
    "ExtractionFailed",
    "ExtractionResult",
    "article_id_from_url",
    "extract_article",
    "extract_content",
    "sanitize_html",
]
