"""Tests for provider configuration loading."""

from besselchu.providers.config import (
    ProviderConfig,
    TaskOverride,
    TextProviderConfig,
    load_provider_config,
)

YAML = """
provider_settings:
  timeout_seconds: 30
  fallback_on_error: false

text_providers:
  gemini:
    priority: 2
    model: gemini/gemini-2.5-flash
    api_key_env: TEST_GEMINI_KEY
  openai:
    priority: 1
    model: openai/gpt-4o
  groq:
    priority: 3
    enabled: false
    model: groq/llama

image_providers:
  gemini:
    priority: 1
    type: gemini
    model: gemini-2.5-flash-image
    supports_reference: true

task_overrides:
  reels_script:
    text_provider: gemini
    temperature: 0.4
"""


class TestLoadProviderConfig:
    """Test YAML loading."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "providers.yaml"
        path.write_text(YAML, encoding="utf-8")

        config = load_provider_config(path)

        assert config.provider_settings.timeout_seconds == 30
        assert config.provider_settings.fallback_on_error is False
        assert [name for name, _ in config.get_enabled_text_providers()] == ["openai", "gemini"]
        assert config.image_providers["gemini"].supports_reference is True

    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_provider_config(tmp_path / "missing.yaml")

        assert [name for name, _ in config.get_enabled_text_providers()] == ["openai", "gemini"]
        assert [name for name, _ in config.get_enabled_image_providers()] == ["gemini"]
        assert config.provider_settings.fallback_on_error is True

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "providers.yaml"
        path.write_text("", encoding="utf-8")

        assert load_provider_config(path).text_providers.keys() == {"openai", "gemini"}


class TestProviderConfig:
    """Test routing helpers."""

    def test_image_timeout_default(self):
        assert ProviderConfig().image_providers["gemini"].timeout == 120

    def test_task_temperature(self):
        config = ProviderConfig(task_overrides={"reels_script": TaskOverride(temperature=0.3)})

        assert config.get_task_temperature("reels_script", 0.7) == 0.3
        assert config.get_task_temperature("instagram_post", 0.7) == 0.7
        assert config.get_task_temperature(None, 0.7) == 0.7

    def test_api_key_from_env(self, monkeypatch):
        monkeypatch.setenv("TEST_KEY", "secret")
        provider = TextProviderConfig(priority=1, model="x", api_key_env="TEST_KEY")
        assert provider.get_api_key() == "secret"

    def test_explicit_api_key_wins(self, monkeypatch):
        monkeypatch.setenv("TEST_KEY", "from-env")
        provider = TextProviderConfig(priority=1, model="x", api_key="inline", api_key_env="TEST_KEY")
        assert provider.get_api_key() == "inline"
