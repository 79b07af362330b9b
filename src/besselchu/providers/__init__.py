"""AI Providers - Text (Agno) and Image generation."""

from .text import TextProvider
from .image import AspectRatio, ImageGenerationError, ImageProvider, ReferenceImage
from .config import ProviderConfig, load_provider_config

__all__ = [
    "TextProvider",
    "ImageProvider",
    "AspectRatio",
    "ReferenceImage",
    "ImageGenerationError",
    "ProviderConfig",
    "load_provider_config",
]
