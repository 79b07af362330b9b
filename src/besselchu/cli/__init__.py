"""CLI package - modular, feature-based, stateless architecture.

This package provides a clean separation of concerns:
- core/: Shared utilities (types, validators, console, loading status)
- books/: Bestseller listing and cache commands
- generate/: Instagram post and Reels script generation
- interactive/: Step-by-step terminal session

Usage:
    python -m besselchu.cli --help
    python -m besselchu.cli bestsellers
    python -m besselchu.cli generate-post 1
"""

from .app import app, main

__all__ = ["app", "main"]
