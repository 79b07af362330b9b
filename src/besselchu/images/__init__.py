"""Post and scene image generation anchored on the book cover."""

from .reference import ReferenceImageLoader, to_jpeg
from .generator import ImageGenerator, decode_data_uri, to_data_uri
from .batch import SceneBatchGenerator

__all__ = [
    "ReferenceImageLoader",
    "ImageGenerator",
    "SceneBatchGenerator",
    "decode_data_uri",
    "to_data_uri",
    "to_jpeg",
]
