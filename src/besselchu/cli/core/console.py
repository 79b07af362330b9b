"""Shared Rich console and message helpers for the CLI."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.theme import Theme

THEME = Theme({
    "error": "bold red",
    "warning": "yellow",
    "success": "green",
    "info": "cyan",
})

# Legacy Windows code pages cannot draw Unicode box characters
console = Console(theme=THEME, safe_box=sys.platform == "win32")


def print_details(details: dict | None, target: Console | None = None) -> None:
    """Print ``key: value`` lines under an error or warning."""
    out = target or console
    for key, value in (details or {}).items():
        out.print(f"  [dim]{key}:[/dim] [yellow]{value}[/yellow]")


def print_error(message: str, details: dict | None = None) -> None:
    console.print(f"[error]Error: {message}[/error]")
    print_details(details)


def print_warning(message: str) -> None:
    console.print(f"[warning]Warning: {message}[/warning]")


def print_success(message: str) -> None:
    console.print(f"[success]{message}[/success]")


def print_info(message: str) -> None:
    console.print(f"[info]{message}[/info]")
