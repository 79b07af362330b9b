"""Path-related constants for besselchu.

This module contains directory paths, cache keys and naming conventions:
- Project directory structure
- Cache and output locations
- Log file locations

The project uses a flat folder structure at the project root:
  config/providers.yaml
  .cache/<cache-key>.json
  output/YYYY-MM-DD/<HHMMSS>-<type>-<slug>/
  logs/ai_calls.log
"""

from pathlib import Path
from typing import Final


# =============================================================================
# PROJECT ROOT DETECTION
# =============================================================================

def get_project_root() -> Path:
    """Get the project root directory.

    Walks up from this file to find the directory containing 'config' or
    'pyproject.toml'. Falls back to current working directory if not found.

    Returns:
        Path to project root directory.
    """
    current = Path(__file__).resolve().parent

    for _ in range(10):  # Max 10 levels up
        if (current / "config").exists() or (current / "pyproject.toml").exists():
            return current
        parent = current.parent
        if parent == current:  # Reached filesystem root
            break
        current = parent

    return Path.cwd()


# =============================================================================
# MAIN DIRECTORIES
# =============================================================================

PROJECT_ROOT: Path = get_project_root()
"""Project root directory. Auto-detected from file location."""

CONFIG_DIR_NAME: Final[str] = "config"
"""Name of the configuration directory."""

CACHE_DIR_NAME: Final[str] = ".cache"
"""Name of the cache directory."""

OUTPUT_DIR_NAME: Final[str] = "output"
"""Name of the directory exported content is saved to."""

LOGS_DIR_NAME: Final[str] = "logs"
"""Name of the logs directory."""

PROVIDERS_CONFIG_FILENAME: Final[str] = "providers.yaml"
"""AI provider configuration file inside the config directory."""


# =============================================================================
# CACHE KEYS
# =============================================================================

BESTSELLER_CACHE_KEY: Final[str] = "bessel_bestseller_cache_v2"
"""Key of the single-slot daily bestseller cache record."""


# =============================================================================
# OUTPUT NAMING
# =============================================================================

OUTPUT_FOLDER_PATTERN: Final[str] = "{date}/{time}-{content_type}-{slug}"
"""Folder pattern for exported content, relative to the output directory."""

CAPTION_FILENAME: Final[str] = "caption.txt"
METADATA_FILENAME: Final[str] = "metadata.json"
POST_IMAGE_FILENAME: Final[str] = "post.jpg"
SCENE_IMAGE_PATTERN: Final[str] = "scene_{number:02d}.jpg"


# =============================================================================
# PATH HELPERS
# =============================================================================

def get_cache_dir() -> Path:
    """Get the default cache directory."""
    return PROJECT_ROOT / CACHE_DIR_NAME


def get_output_dir() -> Path:
    """Get the default output directory."""
    return PROJECT_ROOT / OUTPUT_DIR_NAME


def get_logs_dir() -> Path:
    """Get the logs directory, creating it if needed."""
    logs_dir = PROJECT_ROOT / LOGS_DIR_NAME
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


def get_providers_config_path() -> Path:
    """Get the default provider configuration path."""
    return PROJECT_ROOT / CONFIG_DIR_NAME / PROVIDERS_CONFIG_FILENAME
