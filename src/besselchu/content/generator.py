"""Content generator: book + content type -> GeneratedContent.

Calls the text provider once and parses its JSON answer. A failed call
raises ``ContentGenerationError``; an answer that cannot be parsed is kept
as raw text instead of failing the generation.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from ..bestsellers.models import Book
from ..constants import REELS_MAX_SCENES, REELS_MIN_SCENES, TEXT_TEMPERATURE
from ..hashtag import extract_hashtags
from ..providers.text import TextProvider
from .models import ContentGenerationError, ContentType, GeneratedContent, Scene
from .prompts import (
    POST_SYSTEM_PROMPT,
    REELS_SYSTEM_PROMPT,
    build_post_prompt,
    build_reels_prompt,
)
from .responses import PostResponse, ReelsResponse

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_CONTENT = "Generation failed"

_CODE_FENCE_PATTERN = re.compile(r'^```(?:json)?\s*|\s*```$', re.IGNORECASE)


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence, if any."""
    return _CODE_FENCE_PATTERN.sub("", text.strip()).strip()


def extract_json(response: str) -> Any:
    """Parse JSON from a model response.

    Tries the fence-stripped text first, then the outermost ``{...}`` span.

    Raises:
        ValueError: If no valid JSON is found.
    """
    text = strip_code_fences(response)

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        try:
            return json.loads(text[start:end + 1])
        except json.JSONDecodeError:
            pass

    raise ValueError("No valid JSON found in response")


def format_scene(scene: Scene) -> str:
    """Render one scene as plain text."""
    return (
        f"[{scene.time_range}] Scene {scene.scene_number}\n"
        f"Visual: {scene.visual_description}\n"
        f"Audio: {scene.audio_script}"
    )


class MalformedResponseError(ValueError):
    """The model answered, but not in the requested shape."""


class ContentGenerator:
    """Generate an Instagram post or a Reels storyboard for a book.

    Usage:
        generator = ContentGenerator()
        result = await generator.generate(book, ContentType.INSTAGRAM_POST)
    """

    def __init__(
        self,
        text_provider: TextProvider | None = None,
        temperature: float = TEXT_TEMPERATURE,
    ):
        self._text_provider = text_provider
        self.temperature = temperature

    @property
    def text_provider(self) -> TextProvider:
        if self._text_provider is None:
            self._text_provider = TextProvider()
        return self._text_provider

    async def generate(self, book: Book, content_type: ContentType) -> GeneratedContent:
        """Generate content for ``book``.

        Args:
            book: The selected book.
            content_type: Post or Reels script.

        Returns:
            Text-only GeneratedContent; images are added later via merges.

        Raises:
            ContentGenerationError: If the text model call fails.
        """
        content_type = ContentType(content_type)

        if content_type is ContentType.INSTAGRAM_POST:
            system, prompt = POST_SYSTEM_PROMPT, build_post_prompt(book)
        else:
            system, prompt = REELS_SYSTEM_PROMPT, build_reels_prompt(book)

        try:
            raw = await self.text_provider.generate(
                prompt,
                system=system,
                task=content_type.value,
                temperature=self.temperature,
            )
        except Exception as e:
            logger.error(f"Text generation failed for '{book.title}': {e}")
            raise ContentGenerationError(cause=e) from e

        raw = raw or ""
        try:
            if content_type is ContentType.INSTAGRAM_POST:
                result = self._parse_post(raw)
            else:
                result = self._parse_reels(raw)
        except (ValueError, ValidationError) as e:
            logger.warning(f"Unparseable {content_type.value} response, keeping raw text: {e}")
            result = GeneratedContent(
                type=content_type,
                content=raw if raw.strip() else EMPTY_RESPONSE_CONTENT,
            )

        return result.model_copy(update={"original_cover_url": book.cover_url})

    def _parse_post(self, raw: str) -> GeneratedContent:
        data = PostResponse.model_validate(extract_json(raw))
        hashtags = data.hashtags.strip()
        content = f"{data.caption}\n\n{hashtags}" if hashtags else data.caption
        return GeneratedContent(
            type=ContentType.INSTAGRAM_POST,
            content=content,
            hashtags=extract_hashtags(hashtags),
            image_prompt=data.image_prompt,
        )

    def _parse_reels(self, raw: str) -> GeneratedContent:
        data = ReelsResponse.model_validate(extract_json(raw))
        raw_scenes = data.scenes[:REELS_MAX_SCENES]
        if len(raw_scenes) < REELS_MIN_SCENES:
            raise MalformedResponseError(
                f"Expected at least {REELS_MIN_SCENES} scenes, got {len(raw_scenes)}"
            )

        scenes = [
            Scene(
                scene_number=number,
                time_range=item.time_range,
                visual_description=item.visual_description,
                audio_script=item.audio_script,
                image_prompt=item.image_prompt,
            )
            for number, item in enumerate(raw_scenes, start=1)
        ]

        return GeneratedContent(
            type=ContentType.REELS_SCRIPT,
            content="\n\n".join(format_scene(scene) for scene in scenes),
            scenes=scenes,
        )
