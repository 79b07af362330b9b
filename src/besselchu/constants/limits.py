"""Limit constants for besselchu.

This module contains all limits and constraints:
- Bestseller API limits
- Content length limits
- Timeout settings

These limits are derived from Instagram requirements and the
Aladin / model provider APIs.
"""

from typing import Final

# =============================================================================
# INSTAGRAM LIMITS
# =============================================================================

INSTAGRAM_HASHTAG_MAX_COUNT: Final[int] = 30
"""Maximum number of hashtags allowed per post."""


# =============================================================================
# BESTSELLER LIMITS
# =============================================================================

ALADIN_MAX_RESULTS: Final[int] = 20
"""Number of items requested from the Aladin ItemList API."""

MAX_BESTSELLERS: Final[int] = 10
"""Number of books kept from the bestseller list."""


# =============================================================================
# REELS STORYBOARD
# =============================================================================

REELS_MIN_SCENES: Final[int] = 4
"""Minimum scenes accepted in a Reels storyboard."""

REELS_MAX_SCENES: Final[int] = 5
"""Maximum scenes kept from a Reels storyboard."""


# =============================================================================
# TIMEOUTS
# =============================================================================

DEFAULT_HTTP_TIMEOUT_SECONDS: Final[float] = 15.0
"""Timeout for the bestseller API and reference image downloads."""

IMAGE_TIMEOUT_SECONDS: Final[float] = 120.0
"""Timeout for image model HTTP calls."""

LOADING_MESSAGE_INTERVAL_SECONDS: Final[float] = 2.5
"""How often the CLI rotates the loading message while searching."""


# =============================================================================
# GENERATION
# =============================================================================

TEXT_TEMPERATURE: Final[float] = 0.7
"""Sampling temperature for caption and storyboard generation."""
