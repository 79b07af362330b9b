"""Bestseller retrieval: Aladin API, fixed fallback list and daily cache."""

from .models import AladinItem, BestsellerResult, Book, CacheRecord
from .fallback import FALLBACK_NOTE, fallback_books, fallback_result
from .provider import AladinBestsellerProvider, map_items
from .cache import CacheStore, DailyCache, JsonFileCacheStore, MemoryCacheStore
from .service import BestsellerService

__all__ = [
    "AladinItem",
    "Book",
    "BestsellerResult",
    "CacheRecord",
    "FALLBACK_NOTE",
    "fallback_books",
    "fallback_result",
    "AladinBestsellerProvider",
    "map_items",
    "CacheStore",
    "DailyCache",
    "JsonFileCacheStore",
    "MemoryCacheStore",
    "BestsellerService",
]
