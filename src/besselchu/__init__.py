"""besselchu - bestseller-driven Instagram content generator.

Fetches the daily bestseller list, writes a post caption or a Reels
storyboard for a chosen book and generates imagery that references the
book's cover.

Usage:
    python -m besselchu.cli --help
    besselchu bestsellers
    besselchu generate-post 1
    besselchu generate-reels 3
"""

__version__ = "0.3.0"
