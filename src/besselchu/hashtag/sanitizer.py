"""Hashtag extraction and normalization.

Provides HashtagSanitizer with methods for:
- Extracting unique hashtags from generated text (Hangul included)
- Validating the count against Instagram's limit
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from ..constants import INSTAGRAM_HASHTAG_MAX_COUNT


class HashtagSanitizer:
    """Sanitizer for Instagram hashtags.

    Example:
        sanitizer = HashtagSanitizer(max_hashtags=3)
        sanitizer.extract_hashtags("#책스타그램 #독서 #책스타그램")  # ["#책스타그램", "#독서"]
        sanitizer.validate("#a #b #c #d")  # (False, 4, "Too many hashtags: 4 ...")
    """

    # '#' followed by word characters, including Hangul and other non-ASCII letters
    HASHTAG_PATTERN = re.compile(r'#[\w\u0080-\uFFFF]+', re.UNICODE)

    def __init__(self, max_hashtags: Optional[int] = None):
        """Initialize sanitizer.

        Args:
            max_hashtags: Maximum allowed hashtags. Defaults to INSTAGRAM_HASHTAG_MAX_COUNT.
        """
        self.max_hashtags = max_hashtags if max_hashtags is not None else INSTAGRAM_HASHTAG_MAX_COUNT

    def extract_hashtags(self, text: str | None) -> list[str]:
        """Extract hashtags from text in order of first appearance, without duplicates."""
        if not text:
            return []
        seen: set[str] = set()
        tags: list[str] = []
        for tag in self.HASHTAG_PATTERN.findall(text):
            if tag not in seen:
                seen.add(tag)
                tags.append(tag)
        return tags

    def count_hashtags(self, text: str | None) -> int:
        return len(self.extract_hashtags(text))

    def validate(self, text: str | None) -> tuple[bool, int, str]:
        """Validate hashtag count against limit.

        Returns:
            Tuple of (is_valid, count, message).
        """
        count = self.count_hashtags(text)
        is_valid = count <= self.max_hashtags

        if is_valid:
            message = f"Hashtag count OK ({count}/{self.max_hashtags})"
        else:
            over = count - self.max_hashtags
            message = f"Too many hashtags: {count} (limit: {self.max_hashtags}, over by {over})"

        return is_valid, count, message


_default_sanitizer = HashtagSanitizer()


def extract_hashtags(text: str | None) -> list[str]:
    """Return the unique ``#tag`` tokens of ``text`` in order."""
    return _default_sanitizer.extract_hashtags(text)


def format_hashtags(tags: Iterable[str]) -> str:
    """Join tags with single spaces, adding a missing '#' prefix."""
    normalized = []
    for tag in tags:
        tag = tag.strip()
        if not tag:
            continue
        normalized.append(tag if tag.startswith("#") else f"#{tag}")
    return " ".join(normalized)
