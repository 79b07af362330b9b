"""Concurrent image generation for all scenes of a Reels script."""

from __future__ import annotations

import asyncio
import logging

from ..content.models import Scene
from ..providers.image import AspectRatio, ReferenceImage
from .generator import ImageGenerator

logger = logging.getLogger(__name__)


class SceneBatchGenerator:
    """Generate a vertical image for every scene.

    The output list has the same length and order as the input. A scene
    whose image could not be produced is returned as the same object.
    """

    def __init__(self, image_generator: ImageGenerator | None = None):
        self.image_generator = image_generator or ImageGenerator()

    async def generate_all(
        self,
        scenes: list[Scene],
        reference_image_url: str | None = None,
        *,
        book_title: str | None = None,
    ) -> list[Scene]:
        """Generate images for ``scenes`` concurrently."""
        if not scenes:
            return []

        reference = await self.image_generator.reference_loader.load(reference_image_url)

        results = await asyncio.gather(
            *(self._generate_one(scene, reference, book_title) for scene in scenes),
            return_exceptions=True,
        )

        updated: list[Scene] = []
        for scene, outcome in zip(scenes, results):
            if isinstance(outcome, BaseException):
                if isinstance(outcome, asyncio.CancelledError):
                    raise outcome
                logger.error(f"Scene {scene.scene_number} image failed: {outcome}")
                updated.append(scene)
            elif outcome is None:
                updated.append(scene)
            else:
                updated.append(scene.model_copy(update={"image_url": outcome}))

        succeeded = sum(1 for new, old in zip(updated, scenes) if new is not old)
        logger.info(f"Scene images: {succeeded}/{len(scenes)} generated")
        return updated

    async def _generate_one(
        self,
        scene: Scene,
        reference: ReferenceImage | None,
        book_title: str | None,
    ) -> str | None:
        return await self.image_generator.generate_with_reference(
            scene.image_prompt,
            reference,
            aspect_ratio=AspectRatio.VERTICAL,
            book_title=book_title,
        )
