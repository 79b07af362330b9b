"""Pure validation functions for CLI arguments."""

from __future__ import annotations

from pathlib import Path

from ...constants import MAX_BESTSELLERS
from .types import Failure, Result, Success


def validate_rank(rank: int, max_rank: int = MAX_BESTSELLERS) -> Result[int]:
    """Validate a 1-based bestseller rank.

    Pure function - no side effects.
    """
    if rank < 1 or rank > max_rank:
        return Failure(
            f"Invalid rank: {rank}",
            {"hint": f"Rank must be between 1 and {max_rank}"},
        )
    return Success(rank)


def validate_output_dir(output_dir: Path) -> Result[Path]:
    """Validate that the output directory is usable (existing dir or creatable)."""
    if output_dir.exists() and not output_dir.is_dir():
        return Failure(
            f"Output path is not a directory: {output_dir}",
            {"path": str(output_dir)},
        )
    return Success(output_dir)
