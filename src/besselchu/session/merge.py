"""Pure functions that fold image results into a GeneratedContent.

None of them mutate their input; each returns a new object (or the same
object when there is nothing to change).
"""

from __future__ import annotations

from ..content.models import GeneratedContent, Scene


def merge_post_image(result: GeneratedContent, image_url: str | None) -> GeneratedContent:
    """Set the post image. A None image keeps the placeholder."""
    if image_url is None:
        return result
    return result.model_copy(update={"image_url": image_url})


def merge_scene_image(result: GeneratedContent, index: int, image_url: str | None) -> GeneratedContent:
    """Set the image of scene ``index``. Other scenes are shared unchanged."""
    if image_url is None or result.scenes is None:
        return result
    if not 0 <= index < len(result.scenes):
        raise IndexError(f"Scene index {index} out of range (0-{len(result.scenes) - 1})")

    scenes = list(result.scenes)
    scenes[index] = scenes[index].model_copy(update={"image_url": image_url})
    return result.model_copy(update={"scenes": scenes})


def merge_scenes(result: GeneratedContent, scenes: list[Scene]) -> GeneratedContent:
    """Replace the scene list with the batch generator's output."""
    if result.scenes is None:
        return result
    if len(scenes) != len(result.scenes):
        raise ValueError(f"Expected {len(result.scenes)} scenes, got {len(scenes)}")
    return result.model_copy(update={"scenes": list(scenes)})
