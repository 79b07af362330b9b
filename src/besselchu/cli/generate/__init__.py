"""Generate feature - Instagram post and Reels script commands."""

from .commands import generate_post, generate_reels
from .params import ContentGenerationParams
from .service import ContentGeneratorService

__all__ = [
    "generate_post",
    "generate_reels",
    "ContentGenerationParams",
    "ContentGeneratorService",
]
