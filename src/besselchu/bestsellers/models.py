"""Data models for bestseller retrieval and caching."""

from __future__ import annotations

import hashlib

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Book(BaseModel):
    """A bestselling book as shown in the selection list."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    title: str
    author: str
    description: str
    rank: int = Field(ge=1)
    keyword: str
    isbn: str | None = None
    cover_url: str | None = None
    cover_description: str | None = None

    @property
    def key(self) -> str:
        """Stable identity for the book, independent of its rank."""
        raw = f"{self.title}|{self.isbn or ''}"
        return hashlib.sha1(raw.encode("utf-8")).hexdigest()[:16]


class BestsellerResult(BaseModel):
    """A ranked list of books plus the pages they were taken from."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    books: list[Book] = Field(default_factory=list)
    source_urls: list[str] = Field(default_factory=list)

    # Set only when the fixed sample list was served
    note: str | None = None

    @property
    def is_fallback(self) -> bool:
        return self.note is not None


class CacheRecord(BaseModel):
    """The single persisted daily cache entry."""

    date: str  # YYYY-MM-DD
    data: BestsellerResult


class AladinItem(BaseModel):
    """One raw entry of the Aladin ItemList ``item`` array."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    title: str | None = None
    author: str | None = None
    description: str | None = None
    isbn: str | None = None
    isbn13: str | None = None
    cover: str | None = None
    category_name: str | None = None
