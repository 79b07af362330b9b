"""Text generation provider using Agno framework.

Thin wrapper over Agno's unified model interface with a priority-ordered
fallback chain taken from ``config/providers.yaml``.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

from .config import ProviderConfig, TextProviderConfig, load_provider_config

_logger = logging.getLogger("ai_calls")


def _create_agno_model(
    provider_name: str,
    provider_config: TextProviderConfig,
    temperature: float | None = None,
) -> Any:
    """Create an Agno model instance for the given provider.

    Agno provides unified interfaces for all major providers.
    """
    # "openai/gpt-4o" -> "gpt-4o"
    model_id = provider_config.model
    if "/" in model_id:
        model_id = model_id.split("/", 1)[1]

    api_key = provider_config.get_api_key()
    base_url = provider_config.get_base_url()

    # Import Agno models lazily so unused backends need no extra packages
    if provider_name == "ollama":
        from agno.models.ollama import Ollama

        options = {"temperature": temperature} if temperature is not None else None
        return Ollama(
            id=model_id,
            host=base_url or "http://localhost:11434",
            options=options,
        )

    elif provider_name == "openai":
        from agno.models.openai import OpenAIChat
        return OpenAIChat(
            id=model_id,
            api_key=api_key,
            temperature=temperature,
        )

    elif provider_name == "groq":
        from agno.models.groq import Groq
        return Groq(
            id=model_id,
            api_key=api_key,
            temperature=temperature,
        )

    elif provider_name == "gemini":
        from agno.models.google import Gemini
        return Gemini(
            id=model_id,
            api_key=api_key,
            temperature=temperature,
        )

    else:
        # Anything else is treated as an OpenAI-compatible endpoint
        from agno.models.openai.like import OpenAILike
        return OpenAILike(
            id=model_id,
            api_key=api_key,
            base_url=base_url,
            temperature=temperature,
        )


class TextProvider:
    """Unified text generation provider using Agno framework.

    Supports OpenAI, Gemini, Groq, Ollama and any OpenAI-compatible endpoint.

    Usage:
        provider = TextProvider()
        response = await provider.generate("Summarize this book", task="instagram_post")
    """

    def __init__(self, config: ProviderConfig | None = None):
        """Initialize the text provider.

        Args:
            config: Provider configuration. If None, loads from default config file.
        """
        self.config = config or load_provider_config()
        self._current_provider: str | None = None
        self._current_model: str | None = None
        self._total_calls = 0

    def _get_providers(self, task: str | None = None) -> list[tuple[str, TextProviderConfig]]:
        """Get list of providers to try, moving the task's preferred provider first."""
        providers = list(self.config.get_enabled_text_providers())

        preferred = None
        if task:
            override = self.config.task_overrides.get(task)
            if override and override.text_provider:
                preferred = override.text_provider

        if preferred:
            preferred = preferred.lower()
            if not any(name == preferred for name, _ in providers):
                if preferred in self.config.text_providers:
                    providers.insert(0, (preferred, self.config.text_providers[preferred]))
            else:
                providers = sorted(providers, key=lambda x: 0 if x[0] == preferred else 1)

        return providers

    async def generate(
        self,
        prompt: str,
        system: str | None = None,
        task: str | None = None,
        temperature: float = 0.7,
    ) -> str:
        """Generate text completion.

        Args:
            prompt: The user prompt to send to the model.
            system: Optional system prompt for context.
            task: Optional task name, used for routing and logging.
            temperature: Sampling temperature (0-2).

        Returns:
            Generated text response.

        Raises:
            Exception: The last provider error when every provider failed.
        """
        from agno.agent import Agent

        providers = self._get_providers(task)
        temperature = self.config.get_task_temperature(task, temperature)
        last_error: Exception | None = None

        for provider_name, provider_config in providers:
            try:
                model = _create_agno_model(provider_name, provider_config, temperature)
                model_id = getattr(model, "id", "unknown") or "unknown"

                self._current_provider = provider_name
                self._current_model = model_id

                start_time = time.time()

                _logger.info(
                    f"AI_REQUEST | provider:{provider_name} | model:{model_id} | task:{task}\n"
                    f"--- SYSTEM ---\n{system or '(none)'}\n"
                    f"--- PROMPT ---\n{prompt}\n"
                    f"--- END REQUEST ---"
                )

                agent = Agent(
                    model=model,
                    instructions=system,
                    markdown=False,
                )

                timeout = self.config.get_text_timeout(provider_config)
                try:
                    response = await asyncio.wait_for(agent.arun(prompt), timeout=timeout)
                except asyncio.TimeoutError:
                    raise TimeoutError(f"{provider_name} timed out after {timeout:g}s") from None
                result = response.content or ""

                duration = time.time() - start_time
                self._total_calls += 1

                _logger.info(
                    f"AI_RESPONSE | provider:{provider_name} | model:{model_id} | "
                    f"task:{task} | duration:{duration:.2f}s\n"
                    f"--- RESPONSE ---\n{result}\n"
                    f"--- END RESPONSE ---"
                )

                return result

            except Exception as e:
                last_error = e
                _logger.warning(f"Provider {provider_name} failed: {e}")
                if self.config.provider_settings.fallback_on_error:
                    continue
                raise

        if last_error:
            raise last_error
        raise RuntimeError("No text providers available")

    @property
    def current_provider(self) -> str | None:
        """Get the name of the last used provider."""
        return self._current_provider

    @property
    def current_model(self) -> str | None:
        """Get the model of the last used provider."""
        return self._current_model

    @property
    def total_calls(self) -> int:
        return self._total_calls
