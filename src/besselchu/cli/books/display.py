"""Display functions for bestseller commands - pure functions for Rich output."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...bestsellers.models import BestsellerResult
from ..core.console import print_details


def build_bestseller_table(result: BestsellerResult) -> Table:
    table = Table(title="Today's Bestsellers", show_lines=False)
    table.add_column("#", justify="right", style="bold cyan", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Keyword", style="magenta")
    table.add_column("Description", style="dim")

    for book in result.books:
        table.add_row(
            str(book.rank),
            book.title,
            book.author,
            book.keyword,
            book.description,
        )
    return table


def show_bestsellers(console: Console, result: BestsellerResult) -> None:
    """Display the ranked list and where it came from."""
    console.print(build_bestseller_table(result))
    for url in result.source_urls:
        console.print(f"[dim]Source:[/dim] [link={url}]{url}[/link]")


def show_cache_cleared(console: Console) -> None:
    console.print(Panel(
        "[green]Bestseller cache cleared.[/green]\n"
        "The next listing will fetch a fresh list.",
        title="Cache",
        border_style="green",
    ))


def show_books_error(console: Console, error: str, details: dict | None = None) -> None:
    console.print(f"\n[red]Error: {error}[/red]")
    print_details(details, console)
