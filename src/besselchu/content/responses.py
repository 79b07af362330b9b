"""Pydantic schemas for the JSON the text model is asked to return.

Field names follow the camelCase keys requested in the prompts.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PostResponse(BaseModel):
    """Instagram post: caption, hashtag string and an English image prompt."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    caption: str = Field(min_length=1, description="Hook, body and closing")
    hashtags: str = Field(default="", description="10-15 Korean hashtags in one string")
    image_prompt: str = Field(min_length=1, description="English prompt with the cover as hero object")


class SceneResponse(BaseModel):
    """One scene of the Reels script."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    scene_number: int | None = None
    time_range: str = Field(description='Time range such as "0-5s"')
    visual_description: str = Field(description="What is on screen (Korean)")
    audio_script: str = Field(description="Voiceover line (Korean)")
    image_prompt: str = Field(description="English prompt for the scene image")


class ReelsResponse(BaseModel):
    """Reels script made of 4-5 scenes."""

    scenes: list[SceneResponse] = Field(min_length=1)
