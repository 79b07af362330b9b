"""Generation CLI commands - thin wrappers orchestrating params, validation, display, and service."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer

from ...content.models import ContentType
from ...providers.config import load_provider_config
from ..core.console import console
from ..core.status import message_at
from ..core.types import Failure
from .display import show_generation_config, show_generation_error, show_generation_result
from .params import ContentGenerationParams
from .service import ContentGeneratorService
from .validators import validate_generation_params


def generate_post(
    rank: int = typer.Argument(..., help="Bestseller rank (1-10)"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Where to save results"),
    no_images: bool = typer.Option(False, "--no-images", help="Skip image generation"),
    copy: bool = typer.Option(False, "--copy", "-c", help="Copy the caption to the clipboard"),
    refresh: bool = typer.Option(False, "--refresh", "-r", help="Ignore today's cached book list"),
) -> None:
    """Generate an Instagram post (caption, hashtags, square image) for a bestseller."""
    _run_generation(ContentType.INSTAGRAM_POST, rank, output_dir, no_images, copy, refresh)


def generate_reels(
    rank: int = typer.Argument(..., help="Bestseller rank (1-10)"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Where to save results"),
    no_images: bool = typer.Option(False, "--no-images", help="Skip scene image generation"),
    copy: bool = typer.Option(False, "--copy", "-c", help="Copy the script to the clipboard"),
    refresh: bool = typer.Option(False, "--refresh", "-r", help="Ignore today's cached book list"),
) -> None:
    """Generate a 4-5 scene Reels storyboard with vertical images for a bestseller."""
    _run_generation(ContentType.REELS_SCRIPT, rank, output_dir, no_images, copy, refresh)


def _run_generation(
    content_type: ContentType,
    rank: int,
    output_dir: Optional[Path],
    no_images: bool,
    copy: bool,
    refresh: bool,
) -> None:
    params = ContentGenerationParams.from_cli(
        rank=rank,
        content_type=content_type,
        output_dir=output_dir,
        no_images=no_images,
        copy=copy,
        refresh=refresh,
    )

    validation = validate_generation_params(params, load_provider_config())
    if isinstance(validation, Failure):
        show_generation_error(console, validation.error, validation.details)
        raise typer.Exit(1)

    show_generation_config(console, params)

    service = ContentGeneratorService()

    async def _run():
        with console.status(_stage_message("search"), spinner="dots") as status:
            return await service.generate(
                params,
                on_stage=lambda stage: status.update(_stage_message(stage)),
            )

    result = asyncio.run(_run())

    if isinstance(result, Failure):
        show_generation_error(console, result.error, result.details)
        raise typer.Exit(1)

    show_generation_result(console, result.value)


STAGE_MESSAGES = {
    "generate": "Writing content...",
    "images": "Generating images from the book cover...",
    "save": "Saving results...",
}


def _stage_message(stage: str) -> str:
    return f"[bold cyan]{STAGE_MESSAGES.get(stage) or message_at(0)}[/bold cyan]"
