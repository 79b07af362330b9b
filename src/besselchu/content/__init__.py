"""Content generation for Instagram posts and Reels scripts."""

from .models import ContentGenerationError, ContentType, GeneratedContent, Scene
from .generator import ContentGenerator, extract_json, format_scene, strip_code_fences
from .responses import PostResponse, ReelsResponse, SceneResponse

__all__ = [
    "ContentType",
    "Scene",
    "GeneratedContent",
    "ContentGenerationError",
    "ContentGenerator",
    "extract_json",
    "format_scene",
    "strip_code_fences",
    "PostResponse",
    "ReelsResponse",
    "SceneResponse",
]
