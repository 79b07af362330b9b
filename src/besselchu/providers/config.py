"""Provider configuration loading and validation."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ..constants import IMAGE_TIMEOUT_SECONDS

# Load .env file
load_dotenv()


class ProviderSettings(BaseModel):
    """Global provider settings."""

    timeout_seconds: float = 60
    fallback_on_error: bool = True


class TextProviderConfig(BaseModel):
    """Configuration for a text provider."""

    priority: int
    enabled: bool = True
    model: str
    base_url: str | None = None
    base_url_env: str | None = None
    api_key: str | None = None
    api_key_env: str | None = None
    timeout: float | None = None  # falls back to provider_settings.timeout_seconds

    def get_api_key(self) -> str | None:
        """Get API key from config or environment."""
        if self.api_key:
            return self.api_key
        if self.api_key_env:
            return os.getenv(self.api_key_env)
        return None

    def get_base_url(self) -> str | None:
        """Get base URL from config or environment."""
        if self.base_url:
            return self.base_url
        if self.base_url_env:
            return os.getenv(self.base_url_env)
        return None


class ImageProviderConfig(BaseModel):
    """Configuration for an image provider."""

    priority: int
    enabled: bool = True
    type: str  # gemini, openai
    model: str
    api_key_env: str | None = None
    timeout: float = IMAGE_TIMEOUT_SECONDS
    supports_reference: bool = False
    settings: dict[str, Any] = Field(default_factory=dict)

    def get_api_key(self) -> str | None:
        """Get API key from environment."""
        if self.api_key_env:
            return os.getenv(self.api_key_env)
        return None


class TaskOverride(BaseModel):
    """Task-specific provider override."""

    text_provider: str | None = None
    temperature: float | None = None


def _default_text_providers() -> dict[str, TextProviderConfig]:
    return {
        "openai": TextProviderConfig(
            priority=1,
            model="openai/gpt-4o",
            api_key_env="OPENAI_API_KEY",
        ),
        "gemini": TextProviderConfig(
            priority=2,
            model="gemini/gemini-2.5-flash",
            api_key_env="GEMINI_API_KEY",
        ),
    }


def _default_image_providers() -> dict[str, ImageProviderConfig]:
    return {
        "gemini": ImageProviderConfig(
            priority=1,
            type="gemini",
            model="gemini-2.5-flash-image",
            api_key_env="GEMINI_API_KEY",
            supports_reference=True,
        ),
    }


class ProviderConfig(BaseModel):
    """Full provider configuration."""

    provider_settings: ProviderSettings = Field(default_factory=ProviderSettings)
    text_providers: dict[str, TextProviderConfig] = Field(default_factory=_default_text_providers)
    image_providers: dict[str, ImageProviderConfig] = Field(default_factory=_default_image_providers)
    task_overrides: dict[str, TaskOverride] = Field(default_factory=dict)

    def get_enabled_text_providers(self) -> list[tuple[str, TextProviderConfig]]:
        """Get enabled text providers sorted by priority."""
        enabled = [
            (name, config)
            for name, config in self.text_providers.items()
            if config.enabled
        ]
        return sorted(enabled, key=lambda x: x[1].priority)

    def get_enabled_image_providers(self) -> list[tuple[str, ImageProviderConfig]]:
        """Get enabled image providers sorted by priority."""
        enabled = [
            (name, config)
            for name, config in self.image_providers.items()
            if config.enabled
        ]
        return sorted(enabled, key=lambda x: x[1].priority)

    def get_text_timeout(self, provider_config: TextProviderConfig) -> float:
        """Timeout in seconds for one text call."""
        return provider_config.timeout or self.provider_settings.timeout_seconds

    def get_task_temperature(self, task: str | None, default: float) -> float:
        """Get the sampling temperature for a task, honoring overrides."""
        if task:
            override = self.task_overrides.get(task)
            if override and override.temperature is not None:
                return override.temperature
        return default


def load_provider_config(config_path: Path | None = None) -> ProviderConfig:
    """Load provider configuration from YAML file."""
    if config_path is None:
        from ..settings import get_settings

        config_path = get_settings().providers_config

    if not config_path.exists():
        # Return default config if file doesn't exist
        return ProviderConfig()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return ProviderConfig(**data)
