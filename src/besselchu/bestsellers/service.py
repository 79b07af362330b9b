"""Bestseller service combining the Aladin provider and the daily cache."""

from __future__ import annotations

from datetime import date

from ..settings import BesselchuSettings, get_settings
from .cache import CacheStore, DailyCache, JsonFileCacheStore
from .models import BestsellerResult
from .provider import AladinBestsellerProvider


class BestsellerService:
    """Entry point for retrieving today's bestseller list.

    Usage:
        service = BestsellerService()
        result = await service.get_bestsellers()
    """

    def __init__(
        self,
        provider: AladinBestsellerProvider | None = None,
        store: CacheStore | None = None,
        settings: BesselchuSettings | None = None,
    ):
        settings = settings or get_settings()
        self.provider = provider or AladinBestsellerProvider(
            ttb_key=settings.aladin_ttb_key,
            timeout=settings.http_timeout,
        )
        self.cache = DailyCache(store if store is not None else JsonFileCacheStore(settings.cache_dir))

    async def get_bestsellers(
        self,
        today: date | None = None,
        refresh: bool = False,
    ) -> BestsellerResult:
        """Get the bestseller list for ``today`` (local date by default)."""
        return await self.cache.get_or_fetch(
            today or date.today(),
            self.provider.fetch,
            refresh=refresh,
        )

    def clear_cache(self) -> None:
        self.cache.clear()

    async def close(self) -> None:
        await self.provider.close()
