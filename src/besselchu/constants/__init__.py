"""Global constants package for besselchu.

PACKAGE STRUCTURE:
-----------------
- paths.py    : Directory paths, cache keys, file naming
- limits.py   : API limits, content constraints, timeouts

USAGE EXAMPLES:
--------------
    from besselchu.constants import MAX_BESTSELLERS, get_cache_dir
"""

from .limits import (
    ALADIN_MAX_RESULTS,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    IMAGE_TIMEOUT_SECONDS,
    INSTAGRAM_HASHTAG_MAX_COUNT,
    LOADING_MESSAGE_INTERVAL_SECONDS,
    MAX_BESTSELLERS,
    REELS_MAX_SCENES,
    REELS_MIN_SCENES,
    TEXT_TEMPERATURE,
)
from .paths import (
    BESTSELLER_CACHE_KEY,
    CAPTION_FILENAME,
    METADATA_FILENAME,
    OUTPUT_FOLDER_PATTERN,
    POST_IMAGE_FILENAME,
    SCENE_IMAGE_PATTERN,
    CACHE_DIR_NAME,
    CONFIG_DIR_NAME,
    LOGS_DIR_NAME,
    OUTPUT_DIR_NAME,
    PROJECT_ROOT,
    get_cache_dir,
    get_logs_dir,
    get_output_dir,
    get_providers_config_path,
)

__all__ = [
    # Limits
    "ALADIN_MAX_RESULTS",
    "DEFAULT_HTTP_TIMEOUT_SECONDS",
    "IMAGE_TIMEOUT_SECONDS",
    "INSTAGRAM_HASHTAG_MAX_COUNT",
    "LOADING_MESSAGE_INTERVAL_SECONDS",
    "MAX_BESTSELLERS",
    "REELS_MAX_SCENES",
    "REELS_MIN_SCENES",
    "TEXT_TEMPERATURE",
    # Paths
    "BESTSELLER_CACHE_KEY",
    "CAPTION_FILENAME",
    "METADATA_FILENAME",
    "OUTPUT_FOLDER_PATTERN",
    "POST_IMAGE_FILENAME",
    "SCENE_IMAGE_PATTERN",
    "CACHE_DIR_NAME",
    "CONFIG_DIR_NAME",
    "LOGS_DIR_NAME",
    "OUTPUT_DIR_NAME",
    "PROJECT_ROOT",
    "get_cache_dir",
    "get_logs_dir",
    "get_output_dir",
    "get_providers_config_path",
]
