"""A deliberately small selector matcher for noise removal.

Supports only what the noise lists need:

    tag          exact tag name                 ``NoiseSelector.tag("nav")``
    role         exact ARIA role                ``NoiseSelector.role("banner")``
    class_token  exact class token              ``NoiseSelector.class_token("header")``
    class        substring of any class token   ``NoiseSelector.class_contains("sidebar")``
    id           prefix of the id attribute     ``NoiseSelector.id_prefix("google-ad")``
    word         hyphen/underscore-delimited word in a class token or the id
                                                ``NoiseSelector.word("ads")``

All attribute comparisons are case-insensitive.
"""

from __future__ import annotations

import re
from typing import Any, NamedTuple

from bs4 import Tag

_WORD_SPLIT_RE = re.compile(r"[-_\s]+")


def attr_str(val: Any) -> str:
    """Convert a BeautifulSoup attribute value (str | list | None) to str."""
    if val is None:
        return ""
    if isinstance(val, list):
        return " ".join(str(v) for v in val)
    return str(val)


def class_tokens(tag: Tag) -> list[str]:
    return attr_str(tag.get("class")).lower().split()


def element_id(tag: Tag) -> str:
    return attr_str(tag.get("id")).strip().lower()


def element_role(tag: Tag) -> str:
    return attr_str(tag.get("role")).strip().lower()


class NoiseSelector(NamedTuple):
    kind: str
    value: str

    @classmethod
    def tag(cls, name: str) -> NoiseSelector:
        return cls("tag", name.lower())

    @classmethod
    def role(cls, name: str) -> NoiseSelector:
        return cls("role", name.lower())

    @classmethod
    def class_token(cls, name: str) -> NoiseSelector:
        return cls("class_token", name.lower())

    @classmethod
    def class_contains(cls, fragment: str) -> NoiseSelector:
        return cls("class", fragment.lower())

    @classmethod
    def id_prefix(cls, prefix: str) -> NoiseSelector:
        return cls("id", prefix.lower())

    @classmethod
    def word(cls, word: str) -> NoiseSelector:
        return cls("word", word.lower())

    @property
    def by_attribute(self) -> bool:
        return self.kind in ("class_token", "class", "id", "word")

    def matches(self, tag: Tag) -> bool:
        if self.kind == "tag":
            return tag.name == self.value
        if self.kind == "role":
            return element_role(tag) == self.value
        if self.kind == "class_token":
            return self.value in class_tokens(tag)
        if self.kind == "class":
            return any(self.value in token for token in class_tokens(tag))
        if self.kind == "id":
            return element_id(tag).startswith(self.value)
        if self.kind == "word":
            names = [*class_tokens(tag), element_id(tag)]
            return any(self.value in _WORD_SPLIT_RE.split(name) for name in names if name)
        return False


def matches_any(tag: Tag, selectors: tuple[NoiseSelector, ...], *, attributes: bool = True) -> bool:
    """Return True if any of *selectors* matches *tag*.

    With ``attributes=False`` only tag-name and role selectors are consulted.
    """
    for selector in selectors:
        if not attributes and selector.by_attribute:
            continue
        if selector.matches(tag):
            return True
    return False
