"""Session state machine and result merge functions."""

from .state import AppState, InvalidStateTransition
from .merge import merge_post_image, merge_scene_image, merge_scenes
from .session import (
    GENERATION_ERROR_MESSAGE,
    SEARCH_ERROR_MESSAGE,
    ContentSession,
)

__all__ = [
    "AppState",
    "InvalidStateTransition",
    "ContentSession",
    "GENERATION_ERROR_MESSAGE",
    "SEARCH_ERROR_MESSAGE",
    "merge_post_image",
    "merge_scene_image",
    "merge_scenes",
]
