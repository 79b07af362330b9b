"""Typer app configuration and logging setup."""

from __future__ import annotations

import asyncio
import logging
import sys
import warnings

import typer
from dotenv import load_dotenv

from ..constants import get_logs_dir

# Load environment variables from .env file
load_dotenv()

# httpx clients closed at interpreter exit emit cosmetic ResourceWarnings
warnings.filterwarnings("ignore", category=ResourceWarning)

if sys.platform == "win32":
    try:
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())
    except AttributeError:
        pass  # Policy not available in this Python version

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
APP_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Create Typer app
app = typer.Typer(
    name="besselchu",
    help="Turn today's bestsellers into Instagram posts and Reels storyboards",
    add_completion=False,
)


def register_commands() -> None:
    """Register all commands from feature modules."""
    from .books.commands import bestsellers, clear_cache

    app.command(name="bestsellers")(bestsellers)
    app.command(name="clear-cache")(clear_cache)

    from .generate.commands import generate_post, generate_reels

    app.command(name="generate-post")(generate_post)
    app.command(name="generate-reels")(generate_reels)

    from .interactive.commands import interactive

    app.command(name="interactive")(interactive)


def _file_logger(name: str, filename: str, fmt: str) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.handlers = []  # Clear any existing handlers
    handler = logging.FileHandler(get_logs_dir() / filename, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    return logger


def setup_logging() -> None:
    """Configure logging for CLI.

    - Suppresses console output from libraries
    - ai_calls: full AI request/response log (logs/ai_calls.log)
    - besselchu: application log (logs/besselchu.log)
    """
    # Remove any default console handlers from root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    for logger_name in ["httpx", "httpcore", "urllib3", "asyncio", "google_genai"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.propagate = False

    _file_logger("ai_calls", "ai_calls.log", LOG_FORMAT)
    _file_logger("besselchu", "besselchu.log", APP_LOG_FORMAT)


# Initialize logging on module import
setup_logging()

# Register all commands
register_commands()


def main() -> None:
    """CLI entry point."""
    app()
