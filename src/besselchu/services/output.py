"""Output service for saving generated content.

Writes one folder per generation:

    output/2025-01-01/093015-instagram_post-불편한-편의점/
        caption.txt
        post.jpg            (or scene_01.jpg ... for Reels)
        metadata.json
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Any

from ..bestsellers.models import Book
from ..constants import (
    CAPTION_FILENAME,
    METADATA_FILENAME,
    OUTPUT_FOLDER_PATTERN,
    POST_IMAGE_FILENAME,
    SCENE_IMAGE_PATTERN,
)
from ..content.models import GeneratedContent
from ..images.generator import decode_data_uri

logger = logging.getLogger(__name__)


def create_slug(text: str, max_length: int = 40) -> str:
    """Filesystem-friendly slug that keeps Hangul and other letters."""
    slug = text.lower()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[\s_-]+", "-", slug)
    return slug[:max_length].strip("-") or "book"


class OutputService:
    """Handles saving generated content to disk.

    Usage:
        service = OutputService(output_dir)
        path = await service.save(result, book)
    """

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    def get_output_path(self, result: GeneratedContent, book: Book, now: datetime | None = None) -> Path:
        now = now or datetime.now()
        folder = OUTPUT_FOLDER_PATTERN.format(
            date=now.strftime("%Y-%m-%d"),
            time=now.strftime("%H%M%S"),
            content_type=result.type.value,
            slug=create_slug(book.title),
        )
        return self.output_dir / folder

    async def save(self, result: GeneratedContent, book: Book, now: datetime | None = None) -> Path:
        """Save caption, images and metadata.

        Returns:
            Path to the created folder.
        """
        output_path = self.get_output_path(result, book, now)
        output_path.mkdir(parents=True, exist_ok=True)

        (output_path / CAPTION_FILENAME).write_text(result.content, encoding="utf-8")

        images = self._save_images(result, output_path)
        self._save_metadata(result, book, output_path, images)

        logger.info(f"Saved {result.type.value} for '{book.title}' to {output_path}")
        return output_path

    def _save_images(self, result: GeneratedContent, output_path: Path) -> dict[str, str]:
        """Decode data-URI images to files. Returns {source field: filename}."""
        saved: dict[str, str] = {}

        if result.image_url and self._write_image(result.image_url, output_path / POST_IMAGE_FILENAME):
            saved["imageUrl"] = POST_IMAGE_FILENAME

        for index, scene in enumerate(result.scenes or []):
            if not scene.image_url:
                continue
            filename = SCENE_IMAGE_PATTERN.format(number=scene.scene_number)
            if self._write_image(scene.image_url, output_path / filename):
                saved[f"scenes[{index}].imageUrl"] = filename

        return saved

    def _write_image(self, image_url: str, path: Path) -> bool:
        if not image_url.startswith("data:"):
            logger.warning(f"Skipping non-inline image {image_url[:60]}")
            return False
        path.write_bytes(decode_data_uri(image_url))
        return True

    def _save_metadata(
        self,
        result: GeneratedContent,
        book: Book,
        output_path: Path,
        images: dict[str, str],
    ) -> None:
        content: dict[str, Any] = result.model_dump(mode="json", by_alias=True)

        # Inline image data lives in the image files
        if content.get("imageUrl"):
            content["imageUrl"] = images.get("imageUrl", content["imageUrl"])
        for index, scene in enumerate(content.get("scenes") or []):
            if scene.get("imageUrl"):
                scene["imageUrl"] = images.get(f"scenes[{index}].imageUrl", scene["imageUrl"])

        metadata = {
            "generatedAt": datetime.now().isoformat(timespec="seconds"),
            "book": book.model_dump(mode="json", by_alias=True),
            "content": content,
        }

        with open(output_path / METADATA_FILENAME, "w", encoding="utf-8") as f:
            json.dump(metadata, f, indent=2, ensure_ascii=False)
