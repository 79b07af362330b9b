"""Stateless service running one generation through a ContentSession."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from ...content.models import ContentGenerationError
from ...services.output import OutputService
from ...services.share import ShareService
from ...session.session import ContentSession
from ..core.types import Failure, GenerationResult, Result, Success
from .params import ContentGenerationParams

logger = logging.getLogger(__name__)


class ContentGeneratorService:
    """Drive search -> select -> generate -> images -> save for one book."""

    def __init__(self, session: ContentSession | None = None):
        self._session = session

    def _get_session(self, params: ContentGenerationParams) -> ContentSession:
        if self._session is None:
            self._session = ContentSession(generate_images=params.with_images)
        else:
            self._session.generate_images = params.with_images
        return self._session

    async def generate(
        self,
        params: ContentGenerationParams,
        on_stage: Optional[Callable[[str], None]] = None,
    ) -> Result[GenerationResult]:
        """Generate and save content for the book at ``params.rank``.

        Args:
            params: Validated generation parameters.
            on_stage: Called with "search", "generate", "images" and "save" as work progresses.

        Returns:
            Result containing GenerationResult or Failure
        """
        session = self._get_session(params)
        start_time = time.time()
        notify = on_stage or (lambda stage: None)

        try:
            notify("search")
            listing = await session.fetch_bestsellers(refresh=params.refresh)
            if listing is None:
                return Failure(session.error or "Failed to retrieve bestseller data.")

            if params.index >= len(session.books):
                return Failure(
                    f"No book at rank {params.rank}",
                    {"available": len(session.books)},
                )

            book = session.select_book(params.index)

            notify("generate")
            try:
                await session.generate(params.content_type)
            except ContentGenerationError as e:
                return Failure(str(e), {"book": book.title})

            if session.is_generating_images:
                notify("images")
            result = await session.wait_for_images()
            if result is None:
                return Failure("Generation was reset before completion")

            notify("save")
            share = ShareService(OutputService(params.output_dir), copy_caption=params.copy_caption)
            outcome = await share.share(result, book)

            return Success(GenerationResult(
                content=result,
                book=book,
                output_path=outcome.saved_path,
                copied=outcome.copied,
                duration_seconds=time.time() - start_time,
                metadata={
                    "fallback_data": listing.is_fallback,
                    "pending_images": result.pending_images,
                    "skipped": outcome.skipped,
                },
            ))

        except OSError as e:
            logger.error(f"Saving output failed: {e}")
            return Failure("Could not save the generated content", {"reason": str(e)})

        finally:
            await session.close()
