"""Hashtag extraction and normalization.

Provides:
- extract_hashtags / format_hashtags: helpers for the generated hashtag string
- HashtagSanitizer: counting and validating hashtags
"""

from .sanitizer import HashtagSanitizer, extract_hashtags, format_hashtags

__all__ = [
    "HashtagSanitizer",
    "extract_hashtags",
    "format_hashtags",
]
