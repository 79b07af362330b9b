"""Interactive feature - step-by-step session in the terminal."""

from .commands import interactive

__all__ = ["interactive"]
