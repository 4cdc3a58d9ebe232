"""Extraction sub-package: deterministic distractor removal and content selection."""

from .distractors import remove_related_container, remove_structural_noise, remove_text_distractors
from .main_content import extract_content, find_article_content
from .metadata import extract_byline, extract_metadata, extract_title

__all__ = [
    "extract_byline",
    "extract_content",
    "extract_metadata",
    "extract_title",
    "find_article_content",
    "remove_related_container",
    "remove_structural_noise",
    "remove_text_distractors",
]
