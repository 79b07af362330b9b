"""Tests for bestseller models and the fixed sample list."""

import pytest
from pydantic import ValidationError

from besselchu.bestsellers.fallback import FALLBACK_NOTE, fallback_books, fallback_result
from besselchu.bestsellers.models import BestsellerResult, Book


class TestBook:
    """Test the Book model."""

    def test_is_frozen(self, sample_book):
        with pytest.raises(ValidationError):
            sample_book.title = "changed"

    def test_key_is_stable_across_ranks(self, sample_book):
        moved = sample_book.model_copy(update={"rank": 7})
        assert moved.key == sample_book.key

    def test_key_distinguishes_same_title_different_isbn(self, sample_book):
        other = sample_book.model_copy(update={"isbn": "0000000000000"})
        assert other.key != sample_book.key

    def test_accepts_camel_case_json(self):
        book = Book.model_validate({
            "title": "t",
            "author": "a",
            "description": "d",
            "rank": 1,
            "keyword": "k",
            "coverUrl": "https://example.com/c.jpg",
            "coverDescription": "cover",
        })
        assert book.cover_url == "https://example.com/c.jpg"
        assert book.model_dump(by_alias=True)["coverDescription"] == "cover"

    def test_rank_must_be_positive(self):
        with pytest.raises(ValidationError):
            Book(title="t", author="a", description="d", rank=0, keyword="k")


class TestFallbackData:
    """Test the fixed sample list."""

    def test_exactly_ten_ranked_books(self):
        books = fallback_books()
        assert len(books) == 10
        assert [b.rank for b in books] == list(range(1, 11))

    def test_books_have_covers_and_isbns(self):
        for book in fallback_books():
            assert book.cover_url.startswith("https://image.aladin.co.kr/")
            assert book.isbn and len(book.isbn) == 13
            assert book.cover_description == f"{book.title} book cover"

    def test_result_is_tagged(self):
        result = fallback_result()
        assert result.note == FALLBACK_NOTE
        assert result.is_fallback

    def test_keys_are_unique(self):
        keys = {b.key for b in fallback_books()}
        assert len(keys) == 10


def test_bestseller_result_defaults():
    result = BestsellerResult()
    assert result.books == []
    assert result.note is None
