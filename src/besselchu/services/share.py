"""Share service: copy the caption, then save the files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pyperclip

from ..bestsellers.models import Book
from ..content.models import GeneratedContent
from .output import OutputService

logger = logging.getLogger(__name__)


@dataclass
class ShareOutcome:
    """Which share channels succeeded."""

    copied: bool = False
    saved_path: Path | None = None
    skipped: list[str] = field(default_factory=list)

    @property
    def channels(self) -> list[str]:
        result = []
        if self.copied:
            result.append("clipboard")
        if self.saved_path is not None:
            result.append("files")
        return result


def copy_text(text: str) -> bool:
    """Copy text to the system clipboard. Returns False when no clipboard is available."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning(f"Clipboard unavailable: {e}")
        return False
    return True


class ShareService:
    """Run the share chain: clipboard copy (best effort), then file save.

    A clipboard failure is logged and skipped; the files are always written.
    """

    def __init__(self, output_service: OutputService, copy_caption: bool = True):
        self.output_service = output_service
        self.copy_caption = copy_caption

    async def share(self, result: GeneratedContent, book: Book) -> ShareOutcome:
        outcome = ShareOutcome()

        if self.copy_caption:
            outcome.copied = copy_text(result.content)
            if not outcome.copied:
                outcome.skipped.append("clipboard")

        outcome.saved_path = await self.output_service.save(result, book)
        return outcome
