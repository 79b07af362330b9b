"""Content session: the single-user state machine driving a front-end.

    IDLE -> SEARCHING -> SELECTING -> GENERATING -> RESULT
                 \\                        \\
                  +-> ERROR                 +-> ERROR

Text generation is awaited before RESULT. Images are produced afterwards in
a background task and folded into the result with the merge functions.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from ..bestsellers.models import BestsellerResult, Book
from ..bestsellers.service import BestsellerService
from ..content.generator import ContentGenerator
from ..content.models import ContentGenerationError, ContentType, GeneratedContent
from ..images.batch import SceneBatchGenerator
from ..images.generator import ImageGenerator
from ..providers.image import AspectRatio
from .merge import merge_post_image, merge_scenes
from .state import AppState, InvalidStateTransition, can_transition

logger = logging.getLogger(__name__)

GENERATION_ERROR_MESSAGE = "Failed to generate content."
SEARCH_ERROR_MESSAGE = "Failed to retrieve bestseller data. Please check your network or try again."

ResultListener = Callable[[GeneratedContent], None]


class ContentSession:
    """Holds the books, the selection and the current result of one user session.

    Usage:
        session = ContentSession()
        await session.fetch_bestsellers()
        session.select_book(0)
        result = await session.generate(ContentType.INSTAGRAM_POST)
        result = await session.wait_for_images()
    """

    def __init__(
        self,
        bestseller_service: BestsellerService | None = None,
        content_generator: ContentGenerator | None = None,
        image_generator: ImageGenerator | None = None,
        scene_batch_generator: SceneBatchGenerator | None = None,
        generate_images: bool = True,
    ):
        self.bestseller_service = bestseller_service or BestsellerService()
        self.content_generator = content_generator or ContentGenerator()
        self.image_generator = image_generator or ImageGenerator()
        self.scene_batch_generator = scene_batch_generator or SceneBatchGenerator(self.image_generator)
        self.generate_images = generate_images

        self.state = AppState.IDLE
        self.books: list[Book] = []
        self.source_urls: list[str] = []
        self.selected_book: Book | None = None
        self.content_type: ContentType | None = None
        self.result: GeneratedContent | None = None
        self.error: str | None = None

        # Bumped on every generation and reset; stale image tasks compare against it
        self._generation = 0
        self._image_task: asyncio.Task | None = None
        self._listeners: list[ResultListener] = []

    # -------------------------------------------------------------------------
    # State helpers
    # -------------------------------------------------------------------------

    def _transition(self, target: AppState) -> None:
        if not can_transition(self.state, target):
            raise InvalidStateTransition(self.state, target)
        logger.debug(f"Session state {self.state.value} -> {target.value}")
        self.state = target

    def _fail(self, message: str) -> None:
        self.error = message
        self._transition(AppState.ERROR)

    def on_result_update(self, callback: ResultListener) -> Callable[[], None]:
        """Register a listener for every new result. Returns an unsubscribe function."""
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        if self.result is None:
            return
        for listener in list(self._listeners):
            try:
                listener(self.result)
            except Exception as e:
                logger.error(f"Result listener failed: {e}")

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    async def fetch_bestsellers(self, refresh: bool = False) -> BestsellerResult | None:
        """Load today's list and move to SELECTING.

        Returns None (and moves to ERROR) only on an unexpected failure; the
        data source itself falls back to sample data instead of failing.
        """
        self._transition(AppState.SEARCHING)
        self.error = None
        try:
            result = await self.bestseller_service.get_bestsellers(refresh=refresh)
        except Exception as e:
            logger.error(f"Bestseller fetch failed: {e}")
            self._fail(SEARCH_ERROR_MESSAGE)
            return None

        self.books = list(result.books)
        self.source_urls = list(result.source_urls)
        self.selected_book = None
        self._transition(AppState.SELECTING)
        return result

    def select_book(self, index: int) -> Book:
        """Select the book at list position ``index`` (0-based)."""
        if self.state is not AppState.SELECTING:
            raise InvalidStateTransition(self.state, operation="select a book")
        if not 0 <= index < len(self.books):
            raise IndexError(f"Book index {index} out of range (0-{len(self.books) - 1})")
        self.selected_book = self.books[index]
        return self.selected_book

    async def generate(self, content_type: ContentType | str) -> GeneratedContent:
        """Generate text for the selected book, then start image generation.

        Returns:
            The text-only result. Images arrive later through listeners or
            ``wait_for_images()``.

        Raises:
            ContentGenerationError: The text call failed (session is in ERROR).
        """
        if self.state is not AppState.SELECTING or self.selected_book is None:
            raise InvalidStateTransition(self.state, operation="generate without a selected book")

        content_type = ContentType(content_type)
        book = self.selected_book

        self._cancel_image_task()
        self._generation += 1
        generation = self._generation

        self.content_type = content_type
        self.result = None
        self.error = None
        self._transition(AppState.GENERATING)

        try:
            result = await self.content_generator.generate(book, content_type)
        except ContentGenerationError:
            if generation == self._generation:
                self._fail(GENERATION_ERROR_MESSAGE)
            raise

        if generation != self._generation:
            # Reset while the text was in flight
            return result

        self.result = result
        self._transition(AppState.RESULT)
        self._notify()

        if self.generate_images:
            self._start_image_task(generation, book, result)

        return result

    def _start_image_task(self, generation: int, book: Book, result: GeneratedContent) -> None:
        if result.type is ContentType.INSTAGRAM_POST and result.image_prompt:
            coro = self._run_post_image(generation, book, result.image_prompt)
        elif result.type is ContentType.REELS_SCRIPT and result.scenes:
            coro = self._run_scene_images(generation, book, result)
        else:
            return
        self._image_task = asyncio.create_task(coro)

    async def _run_post_image(self, generation: int, book: Book, prompt: str) -> None:
        try:
            image_url = await self.image_generator.generate(
                prompt,
                book.cover_url,
                aspect_ratio=AspectRatio.SQUARE,
                book_title=book.title,
            )
        except Exception as e:
            logger.error(f"Post image task failed: {e}")
            return
        self._apply(generation, lambda current: merge_post_image(current, image_url))

    async def _run_scene_images(self, generation: int, book: Book, result: GeneratedContent) -> None:
        try:
            scenes = await self.scene_batch_generator.generate_all(
                result.scenes or [],
                book.cover_url,
                book_title=book.title,
            )
        except Exception as e:
            logger.error(f"Scene image task failed: {e}")
            return
        self._apply(generation, lambda current: merge_scenes(current, scenes))

    def _apply(self, generation: int, merge: Callable[[GeneratedContent], GeneratedContent]) -> None:
        if generation != self._generation or self.result is None:
            logger.info("Discarding image result from a previous generation")
            return
        merged = merge(self.result)
        if merged is self.result:
            return
        self.result = merged
        self._notify()

    async def wait_for_images(self) -> GeneratedContent | None:
        """Wait for the background image task and return the current result."""
        task = self._image_task
        if task is not None:
            try:
                await task
            except asyncio.CancelledError:
                if not task.cancelled():
                    raise
        return self.result

    @property
    def is_generating_images(self) -> bool:
        return self._image_task is not None and not self._image_task.done()

    def _cancel_image_task(self) -> None:
        if self._image_task is not None and not self._image_task.done():
            self._image_task.cancel()
        self._image_task = None

    def soft_reset(self) -> None:
        """Go back to book selection, keeping the list."""
        if self.state not in (AppState.RESULT, AppState.ERROR):
            raise InvalidStateTransition(self.state, AppState.SELECTING)
        self._cancel_image_task()
        self._generation += 1
        self.result = None
        self.error = None
        self.content_type = None
        self._transition(AppState.SELECTING)

    def reset(self) -> None:
        """Return to IDLE from any state, dropping everything."""
        self._cancel_image_task()
        self._generation += 1
        self.books = []
        self.source_urls = []
        self.selected_book = None
        self.content_type = None
        self.result = None
        self.error = None
        logger.debug(f"Session state {self.state.value} -> idle (reset)")
        self.state = AppState.IDLE

    async def close(self) -> None:
        self._cancel_image_task()
        await self.bestseller_service.close()
        await self.image_generator.close()
