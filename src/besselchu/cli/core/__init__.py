"""Core utilities for CLI - pure functions and shared types."""

from .types import Failure, GenerationResult, Result, Success
from .validators import validate_output_dir, validate_rank
from .console import console, print_details, print_error, print_info, print_success, print_warning
from .status import LOADING_MESSAGES, message_at, rotating_status

__all__ = [
    # Types
    "Result",
    "Success",
    "Failure",
    "GenerationResult",
    # Validators
    "validate_rank",
    "validate_output_dir",
    # Console
    "console",
    "print_details",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    # Status
    "LOADING_MESSAGES",
    "message_at",
    "rotating_status",
]
