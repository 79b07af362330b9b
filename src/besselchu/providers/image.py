"""Image generation provider with support for multiple backends."""

from __future__ import annotations

import asyncio
import base64
import logging
import time
from dataclasses import dataclass
from enum import Enum
from io import BytesIO
from typing import Any

from PIL import Image

from .config import ImageProviderConfig, ProviderConfig, load_provider_config

_logger = logging.getLogger("ai_calls")


class ImageGenerationError(Exception):
    """Raised when a backend returns no usable image."""


class AspectRatio(str, Enum):
    """Output aspect ratios and their exact Instagram sizes."""

    SQUARE = "1:1"
    VERTICAL = "9:16"

    @property
    def size(self) -> tuple[int, int]:
        return INSTAGRAM_SIZES[self]


INSTAGRAM_SIZES: dict[AspectRatio, tuple[int, int]] = {
    AspectRatio.SQUARE: (1080, 1080),
    AspectRatio.VERTICAL: (1080, 1920),  # Reels / story
}


@dataclass(frozen=True)
class ReferenceImage:
    """A preloaded reference image (normally a book cover)."""

    data: bytes
    mime_type: str = "image/jpeg"

    @property
    def base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")


class ImageProvider:
    """Unified image generation provider.

    Supports multiple backends:
    - Gemini (image modality, accepts a reference image)
    - OpenAI Images (text-only)

    Usage:
        provider = ImageProvider()
        image_bytes = await provider.generate(
            prompt="A book on a wooden desk",
            aspect_ratio=AspectRatio.SQUARE,
            reference=cover,
        )
    """

    def __init__(self, config: ProviderConfig | None = None):
        """Initialize image provider.

        Args:
            config: Provider configuration. If None, loads from default config file.
        """
        self.config = config or load_provider_config()
        self._current_provider: str | None = None
        self._current_model: str | None = None
        self._total_calls = 0

    async def generate(
        self,
        prompt: str,
        aspect_ratio: AspectRatio = AspectRatio.SQUARE,
        reference: ReferenceImage | None = None,
    ) -> bytes:
        """Generate an image from a prompt.

        Args:
            prompt: Text description of the image.
            aspect_ratio: Target aspect ratio; output is cropped to its exact size.
            reference: Optional reference image, used by backends that support it.

        Returns:
            Image as bytes (JPEG format).
        """
        size = aspect_ratio.size
        providers = self.config.get_enabled_image_providers()

        last_error: Exception | None = None

        for provider_name, provider_config in providers:
            try:
                self._current_provider = provider_name
                self._current_model = provider_config.model

                _logger.info(
                    f"IMAGE_REQUEST | provider:{provider_name} | model:{provider_config.model} | "
                    f"aspect:{aspect_ratio.value} | reference:{reference is not None}\n"
                    f"--- PROMPT ---\n{prompt}\n"
                    f"--- END REQUEST ---"
                )

                start_time = time.time()

                if provider_config.type == "gemini":
                    backend = self._generate_gemini(provider_config, prompt, aspect_ratio, reference)
                elif provider_config.type == "openai":
                    backend = self._generate_openai(provider_config, prompt, size)
                else:
                    raise ValueError(f"Unknown provider type: {provider_config.type}")

                try:
                    image_bytes = await asyncio.wait_for(backend, timeout=provider_config.timeout)
                except asyncio.TimeoutError:
                    raise ImageGenerationError(
                        f"{provider_name} timed out after {provider_config.timeout:g}s"
                    ) from None

                duration = time.time() - start_time
                self._total_calls += 1

                _logger.info(
                    f"IMAGE_RESPONSE | provider:{provider_name} | model:{provider_config.model} | "
                    f"duration:{duration:.2f}s | bytes:{len(image_bytes)}"
                )

                return self._resize_image(image_bytes, size)

            except Exception as e:
                last_error = e
                _logger.warning(f"Image provider {provider_name} failed: {e}")
                if self.config.provider_settings.fallback_on_error:
                    continue
                raise

        if last_error:
            raise last_error
        raise RuntimeError("No image providers available")

    async def _generate_gemini(
        self,
        config: ImageProviderConfig,
        prompt: str,
        aspect_ratio: AspectRatio,
        reference: ReferenceImage | None = None,
    ) -> bytes:
        """Generate image using Gemini's image output modality."""
        from google import genai
        from google.genai import types

        api_key = config.get_api_key()
        if not api_key:
            raise ValueError(f"{config.api_key_env or 'GEMINI_API_KEY'} not set")

        client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=int(config.timeout * 1000)),  # milliseconds
        )

        contents: list[Any] = []
        if reference is not None and config.supports_reference:
            contents.append(types.Part.from_bytes(data=reference.data, mime_type=reference.mime_type))
        contents.append(prompt)

        response = await client.aio.models.generate_content(
            model=config.model,
            contents=contents,
            config=types.GenerateContentConfig(
                response_modalities=["Image"],
                image_config=types.ImageConfig(aspect_ratio=aspect_ratio.value),
            ),
        )

        if response.candidates and response.candidates[0].content and response.candidates[0].content.parts:
            for part in response.candidates[0].content.parts:
                if part.inline_data is not None and part.inline_data.data:
                    return part.inline_data.data

        raise ImageGenerationError("No image generated, response contained no image parts")

    async def _generate_openai(
        self,
        config: ImageProviderConfig,
        prompt: str,
        size: tuple[int, int],
    ) -> bytes:
        """Generate image using OpenAI Images API."""
        from openai import AsyncOpenAI

        api_key = config.get_api_key()
        if not api_key:
            raise ValueError("OPENAI_API_KEY not set")

        client = AsyncOpenAI(api_key=api_key, timeout=config.timeout)

        width, height = size
        if height > width:
            api_size = "1024x1792"
        elif width > height:
            api_size = "1792x1024"
        else:
            api_size = "1024x1024"

        response = await client.images.generate(
            model=config.model,
            prompt=prompt,
            size=api_size,
            quality=config.settings.get("quality", "standard"),
            response_format="b64_json",
            n=1,
        )

        if not response.data or not response.data[0].b64_json:
            raise ImageGenerationError("OpenAI returned no image data")

        return base64.b64decode(response.data[0].b64_json)

    def _resize_image(self, image_bytes: bytes, target_size: tuple[int, int]) -> bytes:
        """Resize image to exact target dimensions while preserving aspect ratio.

        Uses cover/crop approach: scales to cover the target area, then center crops.
        """
        img = Image.open(BytesIO(image_bytes))

        if img.mode != "RGB":
            img = img.convert("RGB")

        target_width, target_height = target_size

        if img.size != target_size:
            img_ratio = img.width / img.height
            target_ratio = target_width / target_height

            if img_ratio > target_ratio:
                # Wider than target - fit height, crop width
                new_height = target_height
                new_width = int(round(new_height * img_ratio))
            else:
                # Taller than target - fit width, crop height
                new_width = target_width
                new_height = int(round(new_width / img_ratio))

            img = img.resize((new_width, new_height), Image.Resampling.LANCZOS)

            left = (new_width - target_width) // 2
            top = (new_height - target_height) // 2
            img = img.crop((left, top, left + target_width, top + target_height))

        output = BytesIO()
        img.save(output, format="JPEG", quality=95, optimize=True)
        return output.getvalue()

    @property
    def current_provider(self) -> str | None:
        """Get the name of the last used provider."""
        return self._current_provider
