"""Bestseller CLI commands - thin wrappers orchestrating params, display, and service."""

from __future__ import annotations

import asyncio

import typer

from ..core.console import console
from ..core.status import rotating_status
from ..core.types import Failure
from .display import show_bestsellers, show_books_error, show_cache_cleared
from .params import BestsellerListParams
from .service import BestsellerListService


def bestsellers(
    refresh: bool = typer.Option(False, "--refresh", "-r", help="Ignore today's cached list"),
) -> None:
    """Show today's bestseller list (cached once per day)."""
    params = BestsellerListParams.from_cli(refresh=refresh)
    service = BestsellerListService()

    async def _run():
        async with rotating_status(console):
            return await service.fetch(refresh=params.refresh)

    result = asyncio.run(_run())

    if isinstance(result, Failure):
        show_books_error(console, result.error, result.details)
        raise typer.Exit(1)

    show_bestsellers(console, result.value)


def clear_cache() -> None:
    """Delete the cached bestseller list."""
    result = BestsellerListService().clear_cache()

    if isinstance(result, Failure):
        show_books_error(console, result.error, result.details)
        raise typer.Exit(1)

    show_cache_cleared(console)
