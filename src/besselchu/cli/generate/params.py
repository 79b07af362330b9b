"""Immutable parameter dataclasses for content generation commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ...content.models import ContentType


@dataclass(frozen=True)
class ContentGenerationParams:
    """Parameters for generating one post or Reels script."""

    rank: int
    content_type: ContentType
    output_dir: Path
    with_images: bool
    copy_caption: bool
    refresh: bool

    @property
    def index(self) -> int:
        """0-based list position of the selected book."""
        return self.rank - 1

    @classmethod
    def from_cli(
        cls,
        rank: int,
        content_type: ContentType,
        output_dir: Optional[Path] = None,
        no_images: bool = False,
        copy: bool = False,
        refresh: bool = False,
        **kwargs,
    ) -> "ContentGenerationParams":
        """Create from CLI arguments with defaults from settings."""
        from ...settings import get_settings

        return cls(
            rank=rank,
            content_type=content_type,
            output_dir=output_dir or get_settings().output_dir,
            with_images=not no_images,
            copy_caption=copy,
            refresh=refresh,
        )
