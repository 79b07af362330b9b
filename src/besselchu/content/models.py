"""Data models for generated Instagram content."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ContentType(str, Enum):
    """Kind of content to generate for a book."""

    INSTAGRAM_POST = "instagram_post"
    REELS_SCRIPT = "reels_script"

    @property
    def display_name(self) -> str:
        names = {
            self.INSTAGRAM_POST: "Instagram Post",
            self.REELS_SCRIPT: "Reels Script",
        }
        return names[self]


class Scene(BaseModel):
    """One storyboard scene of a Reels script."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    scene_number: int
    time_range: str  # e.g. "0-5s"
    visual_description: str
    audio_script: str
    image_prompt: str

    # Filled in by the background image task
    image_url: str | None = None


class GeneratedContent(BaseModel):
    """The result of one generation.

    After creation only ``image_url`` and ``scenes[].image_url`` change, and
    only through the functions in ``besselchu.session.merge``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: ContentType
    content: str
    scenes: list[Scene] | None = None
    hashtags: list[str] | None = None
    image_prompt: str | None = None
    image_url: str | None = None
    original_cover_url: str | None = None

    @property
    def is_degraded(self) -> bool:
        """True when the model output could not be parsed into structured parts."""
        if self.type is ContentType.REELS_SCRIPT:
            return self.scenes is None
        return self.image_prompt is None

    @property
    def pending_images(self) -> int:
        """Number of images still missing."""
        if self.scenes is not None:
            return sum(1 for scene in self.scenes if scene.image_url is None)
        if self.image_prompt is not None and self.image_url is None:
            return 1
        return 0


class ContentGenerationError(Exception):
    """Raised when the text model call itself fails."""

    def __init__(self, message: str = "Failed to generate content.", cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause
