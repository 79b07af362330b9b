"""Output and share services."""

from .output import OutputService, create_slug
from .share import ShareOutcome, ShareService, copy_text

__all__ = [
    "OutputService",
    "ShareOutcome",
    "ShareService",
    "copy_text",
    "create_slug",
]
