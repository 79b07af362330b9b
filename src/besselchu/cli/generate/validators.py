"""Generation-specific validators."""

from __future__ import annotations

from ...providers.config import ProviderConfig
from ..core.types import Failure, Result, Success
from ..core.validators import validate_output_dir, validate_rank
from .params import ContentGenerationParams


def validate_text_providers(config: ProviderConfig) -> Result[list[str]]:
    """At least one enabled text provider must be usable.

    Providers without ``api_key_env`` (e.g. local Ollama) always count as usable.
    """
    enabled = config.get_enabled_text_providers()
    if not enabled:
        return Failure(
            "No text AI provider is enabled",
            {"hint": "Enable one under text_providers in config/providers.yaml"},
        )

    usable = [
        name
        for name, provider in enabled
        if not provider.api_key_env or provider.get_api_key()
    ]
    if not usable:
        return Failure(
            "No text AI provider key configured",
            {
                "env_vars": ", ".join(p.api_key_env for _, p in enabled if p.api_key_env),
                "hint": "Set one of them in .env",
            },
        )
    return Success(usable)


def validate_generation_params(
    params: ContentGenerationParams,
    config: ProviderConfig | None = None,
) -> Result[ContentGenerationParams]:
    """Validate all generation parameters.

    Returns Result with params if valid, or Failure with error.
    """
    rank_result = validate_rank(params.rank)
    if isinstance(rank_result, Failure):
        return rank_result

    output_result = validate_output_dir(params.output_dir)
    if isinstance(output_result, Failure):
        return output_result

    if config is not None:
        provider_result = validate_text_providers(config)
        if isinstance(provider_result, Failure):
            return provider_result

    return Success(params)
