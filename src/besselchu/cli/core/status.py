"""Rotating loading message shown while the bestseller list is fetched."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Sequence

from rich.console import Console

from ...constants import LOADING_MESSAGE_INTERVAL_SECONDS

LOADING_MESSAGES: tuple[str, ...] = (
    "Connecting to Aladin...",
    "Accessing weekly bestseller charts...",
    "Analyzing book trends and keywords...",
    "Retrieving cover images...",
    "Finalizing book data...",
)


def message_at(tick: int, messages: Sequence[str] = LOADING_MESSAGES) -> str:
    """Message shown after ``tick`` rotations (wraps around)."""
    return messages[tick % len(messages)]


@asynccontextmanager
async def rotating_status(
    console: Console,
    messages: Sequence[str] = LOADING_MESSAGES,
    interval: float = LOADING_MESSAGE_INTERVAL_SECONDS,
) -> AsyncIterator[None]:
    """Show a spinner whose text cycles through ``messages`` every ``interval`` seconds."""
    with console.status(f"[bold cyan]{message_at(0, messages)}[/bold cyan]", spinner="dots") as status:

        async def rotate() -> None:
            tick = 0
            while True:
                await asyncio.sleep(interval)
                tick += 1
                status.update(f"[bold cyan]{message_at(tick, messages)}[/bold cyan]")

        rotator = asyncio.create_task(rotate())
        try:
            yield
        finally:
            rotator.cancel()
            try:
                await rotator
            except asyncio.CancelledError:
                pass
