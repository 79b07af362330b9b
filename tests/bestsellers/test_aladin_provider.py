"""Tests for the Aladin bestseller provider.

Tests cover:
- Request parameters sent to the ItemList API
- Mapping of items to ranked books
- Fallback to the sample list on every failure path
"""

import json

import httpx
import pytest

from besselchu.bestsellers.fallback import FALLBACK_NOTE
from besselchu.bestsellers.provider import (
    ALADIN_BESTSELLER_PAGE,
    ALADIN_ITEM_LIST_URL,
    AladinBestsellerProvider,
    map_items,
)


def _item(i: int, **overrides) -> dict:
    item = {
        "title": f"책 {i}",
        "author": f"저자 {i}",
        "description": f"설명 {i}",
        "isbn": f"89{i:08d}",
        "isbn13": f"979{i:010d}",
        "cover": f"https://image.aladin.co.kr/cover/{i}.jpg",
        "categoryName": "국내도서>소설/시/희곡>한국소설",
    }
    item.update(overrides)
    return item


def _provider(handler, ttb_key: str | None = "ttb-test") -> AladinBestsellerProvider:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AladinBestsellerProvider(ttb_key=ttb_key, client=client)


# =============================================================================
# Mapping
# =============================================================================

class TestMapItems:
    """Test item -> Book mapping."""

    def test_keeps_top_ten_with_sequential_ranks(self):
        books = map_items([_item(i) for i in range(20)])
        assert len(books) == 10
        assert [b.rank for b in books] == list(range(1, 11))

    def test_keyword_is_last_category_segment(self):
        books = map_items([_item(1, categoryName="국내도서>경제경영> 재테크/투자 ")])
        assert books[0].keyword == "재테크/투자"

    def test_keyword_defaults_when_category_missing(self):
        books = map_items([_item(1, categoryName="")])
        assert books[0].keyword == "도서"

    def test_description_defaults_to_rank_label(self):
        books = map_items([_item(1), _item(2, description="")])
        assert books[1].description == "2위 베스트셀러"

    def test_isbn13_preferred_over_isbn(self):
        books = map_items([_item(1), _item(2, isbn13="")])
        assert books[0].isbn == "9790000000001"
        assert books[1].isbn == "8900000002"

    def test_cover_fields(self):
        book = map_items([_item(3)])[0]
        assert book.cover_url == "https://image.aladin.co.kr/cover/3.jpg"
        assert book.cover_description == '"책 3" book cover'


# =============================================================================
# Fetch
# =============================================================================

class TestFetch:
    """Test the live request path."""

    @pytest.mark.asyncio
    async def test_sends_bestseller_query(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = f"{request.url.scheme}://{request.url.host}{request.url.path}"
            seen["params"] = dict(request.url.params)
            seen["ua"] = request.headers.get("user-agent")
            return httpx.Response(200, json={"item": [_item(1)]})

        provider = _provider(handler)
        await provider.fetch()

        assert seen["url"] == ALADIN_ITEM_LIST_URL
        assert seen["params"] == {
            "ttbkey": "ttb-test",
            "QueryType": "Bestseller",
            "MaxResults": "20",
            "start": "1",
            "SearchTarget": "Book",
            "output": "js",
            "Version": "20131101",
            "Cover": "Big",
        }
        assert seen["ua"].startswith("Mozilla/5.0")

    @pytest.mark.asyncio
    async def test_success_maps_books(self):
        def handler(request):
            return httpx.Response(200, json={"item": [_item(i) for i in range(12)]})

        result = await _provider(handler).fetch()

        assert result.note is None
        assert not result.is_fallback
        assert len(result.books) == 10
        assert result.source_urls == [ALADIN_BESTSELLER_PAGE]

    @pytest.mark.asyncio
    async def test_js_content_type_still_parsed(self):
        body = json.dumps({"item": [_item(1)]}, ensure_ascii=False).encode("utf-8")

        def handler(request):
            return httpx.Response(200, content=body, headers={"content-type": "text/javascript"})

        result = await _provider(handler).fetch()
        assert result.books[0].title == "책 1"


class TestFallback:
    """Every failure path serves the fixed sample list."""

    def _assert_fallback(self, result):
        assert result.note == FALLBACK_NOTE
        assert len(result.books) == 10
        assert [b.rank for b in result.books] == list(range(1, 11))
        assert result.source_urls

    @pytest.mark.asyncio
    async def test_missing_key_does_not_call_api(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={"item": [_item(1)]})

        result = await _provider(handler, ttb_key=None).fetch()

        self._assert_fallback(result)
        assert calls == []

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        self._assert_fallback(await _provider(handler).fetch())

    @pytest.mark.asyncio
    async def test_non_2xx_status(self):
        self._assert_fallback(await _provider(lambda r: httpx.Response(503)).fetch())

    @pytest.mark.asyncio
    async def test_malformed_json(self):
        self._assert_fallback(
            await _provider(lambda r: httpx.Response(200, content=b"{not json")).fetch()
        )

    @pytest.mark.asyncio
    async def test_error_code_in_body(self):
        def handler(request):
            return httpx.Response(200, json={"errorCode": 100, "errorMessage": "잘못된 TTBKey"})

        self._assert_fallback(await _provider(handler).fetch())

    @pytest.mark.asyncio
    async def test_empty_item_list(self):
        self._assert_fallback(await _provider(lambda r: httpx.Response(200, json={"item": []})).fetch())

    @pytest.mark.asyncio
    async def test_non_object_items(self):
        self._assert_fallback(
            await _provider(lambda r: httpx.Response(200, json={"item": ["oops"]})).fetch()
        )

    @pytest.mark.asyncio
    async def test_item_field_with_wrong_type(self):
        def handler(request):
            return httpx.Response(200, json={"item": [_item(1, categoryName=["국내도서", "소설"])]})

        self._assert_fallback(await _provider(handler).fetch())

    @pytest.mark.asyncio
    async def test_item_is_not_a_list(self):
        self._assert_fallback(
            await _provider(lambda r: httpx.Response(200, json={"item": {"title": "책"}})).fetch()
        )
