"""Stateless service for bestseller listing and cache maintenance."""

from __future__ import annotations

import logging

from ...bestsellers.models import BestsellerResult
from ...bestsellers.service import BestsellerService
from ..core.types import Failure, Result, Success

logger = logging.getLogger(__name__)


class BestsellerListService:
    """Wraps BestsellerService calls in the CLI Result type."""

    def __init__(self, bestseller_service: BestsellerService | None = None):
        self._bestseller_service = bestseller_service

    @property
    def bestseller_service(self) -> BestsellerService:
        if self._bestseller_service is None:
            self._bestseller_service = BestsellerService()
        return self._bestseller_service

    async def fetch(self, refresh: bool = False) -> Result[BestsellerResult]:
        try:
            result = await self.bestseller_service.get_bestsellers(refresh=refresh)
        except Exception as e:
            logger.error(f"Bestseller listing failed: {e}")
            return Failure(
                "Failed to retrieve bestseller data. Please check your network or try again.",
                {"reason": str(e)},
            )
        finally:
            await self.bestseller_service.close()
        return Success(result)

    def clear_cache(self) -> Result[None]:
        try:
            self.bestseller_service.clear_cache()
        except OSError as e:
            return Failure("Could not clear the bestseller cache", {"reason": str(e)})
        return Success(None)
