"""Tests for the single-slot daily bestseller cache.

Tests cover:
- Same-day reads never call the fetcher again
- A new day triggers exactly one new fetch
- Corrupt records are dropped and refetched
- The JSON file store
"""

import json
from datetime import date
from unittest.mock import AsyncMock

import pytest

from besselchu.bestsellers.cache import DailyCache, JsonFileCacheStore, MemoryCacheStore
from besselchu.bestsellers.fallback import fallback_result
from besselchu.bestsellers.models import BestsellerResult
from besselchu.bestsellers.service import BestsellerService
from besselchu.constants import BESTSELLER_CACHE_KEY


@pytest.fixture
def store() -> MemoryCacheStore:
    return MemoryCacheStore()


@pytest.fixture
def fetch(bestseller_result: BestsellerResult) -> AsyncMock:
    return AsyncMock(return_value=bestseller_result)


class TestGetOrFetch:
    """Test cache hit / miss behavior."""

    @pytest.mark.asyncio
    async def test_same_date_fetches_once(self, store, fetch, bestseller_result):
        cache = DailyCache(store)
        today = date(2025, 1, 1)

        first = await cache.get_or_fetch(today, fetch)
        second = await cache.get_or_fetch(today, fetch)

        assert fetch.await_count == 1
        assert first == bestseller_result
        assert second == first

    @pytest.mark.asyncio
    async def test_new_date_fetches_again_and_overwrites(self, store, fetch):
        cache = DailyCache(store)

        await cache.get_or_fetch(date(2025, 1, 1), fetch)
        await cache.get_or_fetch(date(2025, 1, 2), fetch)

        assert fetch.await_count == 2
        record = json.loads(store.get(BESTSELLER_CACHE_KEY))
        assert record["date"] == "2025-01-02"

    @pytest.mark.asyncio
    async def test_day_rollover_end_to_end(self, store):
        cache = DailyCache(store)
        day_one = BestsellerResult(books=fallback_result().books[:2], source_urls=["a"])
        day_two = BestsellerResult(books=fallback_result().books[2:4], source_urls=["b"])
        fetch = AsyncMock(side_effect=[day_one, day_two])

        assert await cache.get_or_fetch(date(2025, 1, 1), fetch) == day_one
        assert await cache.get_or_fetch(date(2025, 1, 1), fetch) == day_one
        assert await cache.get_or_fetch(date(2025, 1, 2), fetch) == day_two
        assert await cache.get_or_fetch(date(2025, 1, 2), fetch) == day_two
        assert fetch.await_count == 2

    @pytest.mark.asyncio
    async def test_corrupt_record_is_refetched(self, store, fetch):
        store.set(BESTSELLER_CACHE_KEY, "{this is not json")
        cache = DailyCache(store)

        result = await cache.get_or_fetch(date(2025, 1, 1), fetch)

        assert fetch.await_count == 1
        assert result.books
        record = json.loads(store.get(BESTSELLER_CACHE_KEY))
        assert record["date"] == "2025-01-01"

    def test_record_with_wrong_shape_is_dropped(self, store):
        store.set(BESTSELLER_CACHE_KEY, json.dumps({"date": "2025-01-01", "data": {"books": "nope"}}))
        cache = DailyCache(store)

        assert cache.read() is None
        assert store.get(BESTSELLER_CACHE_KEY) is None

    @pytest.mark.asyncio
    async def test_refresh_skips_read_but_writes(self, store, fetch):
        cache = DailyCache(store)
        today = date(2025, 1, 1)

        await cache.get_or_fetch(today, fetch)
        await cache.get_or_fetch(today, fetch, refresh=True)

        assert fetch.await_count == 2
        assert cache.read().date == "2025-01-01"

    @pytest.mark.asyncio
    async def test_fallback_results_are_cached(self, store):
        cache = DailyCache(store)
        fetch = AsyncMock(return_value=fallback_result())

        await cache.get_or_fetch(date(2025, 1, 1), fetch)
        cached = await cache.get_or_fetch(date(2025, 1, 1), fetch)

        assert fetch.await_count == 1
        assert cached.is_fallback

    def test_clear_removes_record(self, store, bestseller_result):
        cache = DailyCache(store)
        cache.write(date(2025, 1, 1), bestseller_result)

        cache.clear()

        assert cache.read() is None


class TestRecordFormat:
    """The persisted record uses the camelCase wire format."""

    def test_record_keys(self, store, bestseller_result):
        DailyCache(store).write(date(2025, 3, 4), bestseller_result)
        record = json.loads(store.get(BESTSELLER_CACHE_KEY))

        assert set(record) == {"date", "data"}
        assert record["date"] == "2025-03-04"
        assert "sourceUrls" in record["data"]
        assert "coverUrl" in record["data"]["books"][0]


class TestJsonFileCacheStore:
    """Test the file-backed store."""

    def test_round_trip_and_delete(self, tmp_path):
        store = JsonFileCacheStore(tmp_path / "cache")

        assert store.get("k") is None
        store.set("k", '{"a": 1}')
        assert (tmp_path / "cache" / "k.json").exists()
        assert store.get("k") == '{"a": 1}'

        store.delete("k")
        store.delete("k")
        assert store.get("k") is None

    @pytest.mark.asyncio
    async def test_daily_cache_survives_new_instance(self, tmp_path, fetch):
        today = date(2025, 1, 1)
        await DailyCache(JsonFileCacheStore(tmp_path)).get_or_fetch(today, fetch)
        await DailyCache(JsonFileCacheStore(tmp_path)).get_or_fetch(today, fetch)

        assert fetch.await_count == 1


class TestBestsellerService:
    """Test the provider + cache combination."""

    @pytest.mark.asyncio
    async def test_uses_provider_fetch_once_per_day(self, store, bestseller_result):
        provider = AsyncMock()
        provider.fetch.return_value = bestseller_result
        service = BestsellerService(provider=provider, store=store)

        await service.get_bestsellers(today=date(2025, 1, 1))
        await service.get_bestsellers(today=date(2025, 1, 1))

        assert provider.fetch.await_count == 1

    @pytest.mark.asyncio
    async def test_refresh_forces_fetch(self, store, bestseller_result):
        provider = AsyncMock()
        provider.fetch.return_value = bestseller_result
        service = BestsellerService(provider=provider, store=store)

        await service.get_bestsellers(today=date(2025, 1, 1))
        await service.get_bestsellers(today=date(2025, 1, 1), refresh=True)

        assert provider.fetch.await_count == 2
