"""Display functions for generation commands - pure functions for Rich output."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...content.models import ContentType, GeneratedContent
from ...hashtag import HashtagSanitizer, format_hashtags
from ..core.console import print_details
from ..core.types import GenerationResult
from .params import ContentGenerationParams


def show_generation_config(console: Console, params: ContentGenerationParams) -> None:
    """Display generation configuration panel."""
    images_style = "green" if params.with_images else "dim"
    console.print(Panel(
        f"Generating [cyan]{params.content_type.display_name}[/cyan]\n"
        f"Book rank: [yellow]#{params.rank}[/yellow]\n"
        f"Images: [{images_style}]{'Enabled' if params.with_images else 'Disabled'}[/{images_style}]\n"
        f"Copy caption: [yellow]{params.copy_caption}[/yellow]\n"
        f"Output: [dim]{params.output_dir}[/dim]",
        title="Content Generation",
    ))


def build_scene_table(content: GeneratedContent) -> Table:
    table = Table(title="Storyboard", show_lines=True)
    table.add_column("Scene", justify="right", style="bold cyan", no_wrap=True)
    table.add_column("Time", style="yellow", no_wrap=True)
    table.add_column("Visual")
    table.add_column("Audio")
    table.add_column("Image", justify="center", no_wrap=True)

    for scene in content.scenes or []:
        table.add_row(
            str(scene.scene_number),
            scene.time_range,
            scene.visual_description,
            scene.audio_script,
            "[green]yes[/green]" if scene.image_url else "[dim]placeholder[/dim]",
        )
    return table


def show_generated_content(console: Console, content: GeneratedContent, book_title: str) -> None:
    """Render the caption or the storyboard."""
    if content.type is ContentType.REELS_SCRIPT and content.scenes:
        console.print(build_scene_table(content))
    else:
        console.print(Panel(content.content, title=book_title, border_style="cyan"))

    if content.is_degraded:
        console.print("[yellow]The model answer could not be parsed; showing raw text.[/yellow]")

    if content.hashtags:
        is_valid, _, message = HashtagSanitizer().validate(format_hashtags(content.hashtags))
        style = "dim" if is_valid else "yellow"
        console.print(f"[{style}]{message}[/{style}]")


def show_generation_result(console: Console, result: GenerationResult) -> None:
    """Display successful generation result."""
    content: GeneratedContent = result.content
    show_generated_content(console, content, result.book.title)

    pending = result.metadata.get("pending_images", 0)
    lines = [
        "[bold green]Content generated successfully![/bold green]\n",
        f"[bold]Book:[/] {result.book.title} ({result.book.author})",
        f"[bold]Output:[/] {result.output_path}",
    ]
    if result.duration_seconds is not None:
        lines.append(f"[bold]Duration:[/] {result.duration_seconds:.1f}s")
    if pending:
        lines.append(f"[yellow]Images missing:[/] {pending} (placeholders kept)")
    if result.copied:
        lines.append("[bold]Caption:[/] copied to clipboard")
    elif "clipboard" in result.metadata.get("skipped", []):
        lines.append("[dim]Clipboard unavailable, caption saved to file only[/dim]")
    if result.metadata.get("fallback_data"):
        lines.append("[dim]Book list: sample data (live list unavailable)[/dim]")

    console.print(Panel("\n".join(lines), title="Complete", border_style="green"))


def show_generation_error(console: Console, error: str, details: Optional[dict] = None) -> None:
    """Display generation error."""
    console.print(f"\n[red]Error: {error}[/red]")
    print_details(details, console)
