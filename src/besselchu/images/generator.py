"""Image generator producing data URIs for posts and scenes."""

from __future__ import annotations

import base64
import logging

from ..content.prompts import build_post_image_prompt, build_scene_image_prompt
from ..providers.image import AspectRatio, ImageProvider, ReferenceImage
from .reference import ReferenceImageLoader

logger = logging.getLogger(__name__)


def to_data_uri(image_bytes: bytes, mime_type: str = "image/jpeg") -> str:
    return f"data:{mime_type};base64,{base64.b64encode(image_bytes).decode('ascii')}"


def decode_data_uri(uri: str) -> bytes:
    """Inverse of ``to_data_uri``."""
    _, _, payload = uri.partition(",")
    return base64.b64decode(payload)


class ImageGenerator:
    """Generate one image, optionally anchored on the book cover.

    Both entry points return a ``data:image/jpeg;base64,...`` URI, or None
    when anything goes wrong. They never raise.

    Usage:
        generator = ImageGenerator()
        url = await generator.generate(prompt, book.cover_url, book_title=book.title)
    """

    def __init__(
        self,
        image_provider: ImageProvider | None = None,
        reference_loader: ReferenceImageLoader | None = None,
    ):
        self._image_provider = image_provider
        self.reference_loader = reference_loader or ReferenceImageLoader()

    @property
    def image_provider(self) -> ImageProvider:
        if self._image_provider is None:
            self._image_provider = ImageProvider()
        return self._image_provider

    async def generate(
        self,
        prompt: str,
        reference_image_url: str | None = None,
        *,
        aspect_ratio: AspectRatio = AspectRatio.SQUARE,
        book_title: str | None = None,
    ) -> str | None:
        """Load the reference (if any) and generate one image."""
        reference = await self.reference_loader.load(reference_image_url)
        return await self.generate_with_reference(
            prompt,
            reference,
            aspect_ratio=aspect_ratio,
            book_title=book_title,
        )

    async def generate_with_reference(
        self,
        prompt: str,
        reference: ReferenceImage | None,
        *,
        aspect_ratio: AspectRatio = AspectRatio.SQUARE,
        book_title: str | None = None,
    ) -> str | None:
        """Generate one image with an already loaded reference."""
        if reference is not None:
            if aspect_ratio is AspectRatio.SQUARE:
                prompt = build_post_image_prompt(prompt, book_title)
            else:
                prompt = build_scene_image_prompt(prompt)

        try:
            image_bytes = await self.image_provider.generate(
                prompt,
                aspect_ratio=aspect_ratio,
                reference=reference,
            )
        except Exception as e:
            logger.error(f"Image generation failed ({aspect_ratio.value}): {e}")
            return None

        if not image_bytes:
            logger.error(f"Image generation returned no data ({aspect_ratio.value})")
            return None

        return to_data_uri(image_bytes)

    async def close(self) -> None:
        await self.reference_loader.close()
