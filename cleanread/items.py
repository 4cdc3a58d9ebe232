"""Result types: the locator's ExtractionResult and the validated Article."""

from __future__ import annotations

from typing import Any, NamedTuple

from pydantic import BaseModel, Field, field_validator

# ---------------------------------------------------------------------------
# Locator output
# ---------------------------------------------------------------------------

class ExtractionResult(NamedTuple):
    title: str
    byline: str | None
    content: str        # inner HTML of the selected element, not yet sanitized
    text_content: str   # flattened text, stripped
    excerpt: str


# ---------------------------------------------------------------------------
# Pydantic model handed to storage / the reader view
# ---------------------------------------------------------------------------

class Article(BaseModel):
    """A sanitized article ready to be rendered in the reader layout."""

    id: str
    url: str = ""
    title: str = ""
    byline: str | None = None
    content_html: str = ""
    text: str = ""
    extracted_at: int = Field(default=0, description="Epoch milliseconds")

    @field_validator("url", mode="before")
    @classmethod
    def strip_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v or ""

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v or ""

    @field_validator("byline", mode="before")
    @classmethod
    def blank_byline_is_none(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip() or None
        return v
