"""Aladin bestseller list provider.

Fetches the current bestseller list from the Aladin Open API and maps it to
``Book`` models. Every failure path degrades to the fixed sample list, so
``fetch()`` never raises.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from ..constants import ALADIN_MAX_RESULTS, DEFAULT_HTTP_TIMEOUT_SECONDS, MAX_BESTSELLERS
from .fallback import FALLBACK_SOURCE_URLS, fallback_result
from .models import AladinItem, BestsellerResult, Book

logger = logging.getLogger(__name__)

ALADIN_ITEM_LIST_URL = "http://www.aladin.co.kr/ttb/api/ItemList.aspx"
ALADIN_BESTSELLER_PAGE = FALLBACK_SOURCE_URLS[0]

DEFAULT_KEYWORD = "도서"

_HEADERS = {"User-Agent": "Mozilla/5.0"}


def _keyword_from_category(category_name: str | None) -> str:
    """Last segment of an Aladin category path, e.g. "국내도서>소설/시/희곡>한국소설"."""
    if not category_name:
        return DEFAULT_KEYWORD
    last = category_name.split(">")[-1].strip()
    return last or DEFAULT_KEYWORD


def map_items(items: list[Any]) -> list[Book]:
    """Map raw Aladin items to ranked books, keeping the top entries.

    Raises:
        ValidationError: An entry is not an object or has fields of the wrong type.
    """
    if not isinstance(items, list):
        raise TypeError(f"item is {type(items).__name__}, expected a list")

    books: list[Book] = []
    for idx, raw in enumerate(items[:MAX_BESTSELLERS]):
        rank = idx + 1
        item = AladinItem.model_validate(raw)
        title = item.title or ""
        books.append(
            Book(
                title=title,
                author=item.author or "",
                description=item.description or f"{rank}위 베스트셀러",
                rank=rank,
                keyword=_keyword_from_category(item.category_name),
                isbn=item.isbn13 or item.isbn or None,
                cover_url=item.cover or None,
                cover_description=f'"{title}" book cover',
            )
        )
    return books


class AladinBestsellerProvider:
    """Bestseller source backed by the Aladin ItemList API.

    Usage:
        provider = AladinBestsellerProvider(ttb_key="ttb...")
        result = await provider.fetch()
        await provider.close()
    """

    def __init__(
        self,
        ttb_key: str | None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ):
        self.ttb_key = ttb_key
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    async def _get_http_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, headers=_HEADERS)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _build_params(self) -> dict[str, Any]:
        return {
            "ttbkey": self.ttb_key,
            "QueryType": "Bestseller",
            "MaxResults": ALADIN_MAX_RESULTS,
            "start": 1,
            "SearchTarget": "Book",
            "output": "js",
            "Version": "20131101",
            "Cover": "Big",
        }

    def _fallback(self, reason: str) -> BestsellerResult:
        logger.warning(f"Bestseller fallback | reason:{reason}")
        return fallback_result()

    async def fetch(self) -> BestsellerResult:
        """Fetch today's bestseller list.

        Returns:
            The live list, or the sample list tagged with a note on any failure.
        """
        if not self.ttb_key:
            return self._fallback("ALADIN_TTB_KEY not set")

        client = await self._get_http_client()
        try:
            response = await client.get(
                ALADIN_ITEM_LIST_URL,
                params=self._build_params(),
                headers=_HEADERS,
            )
        except httpx.HTTPError as e:
            return self._fallback(f"transport error: {e}")

        if not response.is_success:
            return self._fallback(f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            return self._fallback(f"malformed JSON: {e}")

        if not isinstance(payload, dict):
            return self._fallback("unexpected payload shape")

        if payload.get("errorCode"):
            return self._fallback(
                f"API error {payload.get('errorCode')}: {payload.get('errorMessage', '')}"
            )

        items = payload.get("item") or []
        if not items:
            return self._fallback("empty item list")

        try:
            books = map_items(items)
        except (TypeError, ValueError, AttributeError) as e:
            return self._fallback(f"unmappable items: {e}")

        logger.info(f"Fetched {len(books)} bestsellers from Aladin")
        return BestsellerResult(books=books, source_urls=[ALADIN_BESTSELLER_PAGE])
