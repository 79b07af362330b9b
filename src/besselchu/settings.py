"""Application settings loaded from the environment and .env."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    get_cache_dir,
    get_output_dir,
    get_providers_config_path,
)


class BesselchuSettings(BaseSettings):
    """Runtime settings.

    Every field can be set through the environment or a .env file in the
    working directory, e.g. ``ALADIN_TTB_KEY=ttb...``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    aladin_ttb_key: str | None = Field(default=None, alias="ALADIN_TTB_KEY")
    cache_dir: Path = Field(default_factory=get_cache_dir, alias="BESSELCHU_CACHE_DIR")
    output_dir: Path = Field(default_factory=get_output_dir, alias="BESSELCHU_OUTPUT_DIR")
    providers_config: Path = Field(
        default_factory=get_providers_config_path,
        alias="BESSELCHU_PROVIDERS_CONFIG",
    )
    http_timeout: float = Field(
        default=DEFAULT_HTTP_TIMEOUT_SECONDS,
        alias="BESSELCHU_HTTP_TIMEOUT",
    )


@lru_cache(maxsize=1)
def get_settings() -> BesselchuSettings:
    """Get the process-wide settings instance."""
    return BesselchuSettings()
