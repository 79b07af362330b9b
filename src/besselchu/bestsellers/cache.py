"""Single-slot daily cache for the bestseller list.

The list is fetched at most once per local calendar day. The record is kept
under one key in a ``CacheStore`` and always overwritten as a whole:

    {"date": "2025-01-01", "data": {"books": [...], "sourceUrls": [...]}}
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Awaitable, Callable, Protocol

from pydantic import ValidationError

from ..constants import BESTSELLER_CACHE_KEY
from .models import BestsellerResult, CacheRecord

logger = logging.getLogger(__name__)

FetchFn = Callable[[], Awaitable[BestsellerResult]]


class CacheStore(Protocol):
    """Minimal string key/value store."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryCacheStore:
    """In-process store, used in tests and for throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileCacheStore:
    """Store each key as ``<cache_dir>/<key>.json``."""

    def __init__(self, cache_dir: Path):
        self.cache_dir = Path(cache_dir)

    def _path(self, key: str) -> Path:
        return self.cache_dir / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (IOError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read cache file {path}: {e}")
            return None

    def set(self, key: str, value: str) -> None:
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(value, encoding="utf-8")

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class DailyCache:
    """Serve the bestseller list from the store when it is from today.

    Usage:
        cache = DailyCache(JsonFileCacheStore(get_cache_dir()))
        result = await cache.get_or_fetch(date.today(), provider.fetch)
    """

    def __init__(self, store: CacheStore, key: str = BESTSELLER_CACHE_KEY):
        self.store = store
        self.key = key

    def read(self) -> CacheRecord | None:
        """Read the stored record, dropping it if it no longer parses."""
        raw = self.store.get(self.key)
        if raw is None:
            return None
        try:
            return CacheRecord.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Discarding corrupt bestseller cache record: {e.error_count()} error(s)")
            self.store.delete(self.key)
            return None

    def write(self, today: date, data: BestsellerResult) -> None:
        record = CacheRecord(date=today.isoformat(), data=data)
        self.store.set(self.key, record.model_dump_json(by_alias=True))

    def clear(self) -> None:
        """Remove the cached record."""
        self.store.delete(self.key)

    async def get_or_fetch(
        self,
        today: date,
        fetch: FetchFn,
        refresh: bool = False,
    ) -> BestsellerResult:
        """Return today's list, calling ``fetch`` only on a miss.

        Args:
            today: The local calendar date to key the record on.
            fetch: Async callable producing a fresh result.
            refresh: Skip the read and always fetch (the record is still written).

        Returns:
            The cached or freshly fetched result.
        """
        if not refresh:
            record = self.read()
            if record is not None and record.date == today.isoformat():
                logger.info(f"Bestseller cache hit for {record.date}")
                return record.data

        logger.info(f"Bestseller cache miss for {today.isoformat()}, fetching")
        result = await fetch()
        self.write(today, result)
        return result
