"""Interactive CLI command - prompt-driven loop over a ContentSession."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.prompt import Prompt

from ...bestsellers.models import BestsellerResult
from ...content.models import ContentGenerationError, ContentType
from ...services.output import OutputService
from ...services.share import ShareService, copy_text
from ...session.session import ContentSession
from ...session.state import AppState
from ...settings import get_settings
from ..books.display import show_bestsellers
from ..core.console import console, print_error, print_info, print_success, print_warning
from ..core.status import rotating_status
from ..generate.display import show_generated_content

CONTENT_CHOICES = {
    "p": ContentType.INSTAGRAM_POST,
    "r": ContentType.REELS_SCRIPT,
}


def interactive(
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Where to save results"),
    no_images: bool = typer.Option(False, "--no-images", help="Skip image generation"),
) -> None:
    """Browse today's bestsellers and generate content step by step."""
    output = output_dir or get_settings().output_dir
    asyncio.run(_interactive_loop(ContentSession(generate_images=not no_images), output))


async def _interactive_loop(session: ContentSession, output_dir: Path) -> None:
    share = ShareService(OutputService(output_dir))
    try:
        while True:
            if session.state is AppState.IDLE:
                async with rotating_status(console):
                    await session.fetch_bestsellers()
                continue

            if session.state is AppState.ERROR:
                print_error(session.error or "Unknown error")
                if session.books:
                    session.soft_reset()
                else:
                    choice = Prompt.ask("[r]etry or [q]uit", choices=["r", "q"], default="r")
                    if choice == "q":
                        return
                    session.reset()
                continue

            if session.state is AppState.SELECTING:
                if not await _select_and_generate(session):
                    return
                continue

            if session.state is AppState.RESULT:
                if not await _result_menu(session, share):
                    return
                continue

            # SEARCHING / GENERATING are only observed mid-await
            return
    finally:
        await session.close()


async def _select_and_generate(session: ContentSession) -> bool:
    """Return False when the user quits."""
    show_bestsellers(console, _listing(session))

    valid = [str(i) for i in range(1, len(session.books) + 1)]
    choice = Prompt.ask(
        "Pick a book by rank ([bold]r[/bold] refresh, [bold]q[/bold] quit)",
        choices=valid + ["r", "q"],
        show_choices=False,
    )
    if choice == "q":
        return False
    if choice == "r":
        async with rotating_status(console):
            await session.fetch_bestsellers(refresh=True)
        return True

    book = session.select_book(int(choice) - 1)
    kind = Prompt.ask(
        f"[cyan]{book.title}[/cyan]: [bold]p[/bold]ost or [bold]r[/bold]eels?",
        choices=list(CONTENT_CHOICES),
        default="p",
    )

    try:
        with console.status("[bold cyan]Writing content...[/bold cyan]", spinner="dots"):
            result = await session.generate(CONTENT_CHOICES[kind])
    except ContentGenerationError:
        return True

    show_generated_content(console, result, book.title)

    if session.is_generating_images:
        with console.status("[bold cyan]Generating images from the book cover...[/bold cyan]", spinner="dots"):
            result = await session.wait_for_images()
        if result is not None and result.pending_images:
            print_warning(f"{result.pending_images} image(s) could not be generated")
        else:
            print_success("Images ready")
    return True


async def _result_menu(session: ContentSession, share: ShareService) -> bool:
    """Return False when the user quits."""
    result = session.result
    book = session.selected_book
    if result is None or book is None:
        session.reset()
        return True

    actions = "[s]ave+copy  [c]opy caption  [i]mage prompt  [b]ack to list  [n]ew search  [q]uit"
    choice = Prompt.ask(actions, choices=["s", "c", "i", "b", "n", "q"], default="s")

    if choice == "s":
        try:
            outcome = await share.share(result, book)
        except OSError as e:
            print_error("Could not save the generated content", {"reason": str(e)})
            return True
        if outcome.copied:
            print_success("Caption copied to clipboard")
        print_success(f"Saved to {outcome.saved_path}")
    elif choice == "c":
        if copy_text(result.content):
            print_success("Caption copied to clipboard")
        else:
            print_warning("Clipboard unavailable")
    elif choice == "i":
        _copy_image_prompt(session)
    elif choice == "b":
        session.soft_reset()
    elif choice == "n":
        session.reset()
    else:
        return False
    return True


def _copy_image_prompt(session: ContentSession) -> None:
    result = session.result
    if result is None:
        return
    if result.scenes:
        numbers = [str(scene.scene_number) for scene in result.scenes]
        picked = Prompt.ask("Scene number", choices=numbers, default=numbers[0])
        prompt = result.scenes[int(picked) - 1].image_prompt
    elif result.image_prompt:
        prompt = result.image_prompt
    else:
        print_info("No image prompt available for this result")
        return

    if copy_text(prompt):
        print_success("Image prompt copied to clipboard")
    else:
        console.print(prompt)


def _listing(session: ContentSession) -> BestsellerResult:
    return BestsellerResult(books=session.books, source_urls=session.source_urls)
