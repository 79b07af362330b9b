"""Reference image loader for book covers."""

from __future__ import annotations

import logging
from io import BytesIO

import httpx
from PIL import Image, UnidentifiedImageError

from ..constants import DEFAULT_HTTP_TIMEOUT_SECONDS
from ..providers.image import ReferenceImage

logger = logging.getLogger(__name__)


def to_jpeg(image_bytes: bytes) -> bytes:
    """Re-encode any Pillow-readable image as RGB JPEG."""
    img = Image.open(BytesIO(image_bytes))
    if img.mode != "RGB":
        img = img.convert("RGB")
    output = BytesIO()
    img.save(output, format="JPEG", quality=92)
    return output.getvalue()


class ReferenceImageLoader:
    """Fetch a cover image and prepare it as a generation reference.

    ``load()`` returns None instead of raising, so a missing or unreachable
    cover only means the image is generated from the text prompt alone.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    ):
        self._client = client
        self._owns_client = client is None
        self.timeout = timeout

    async def _get_http_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers={"User-Agent": "Mozilla/5.0"},
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def load(self, url: str | None) -> ReferenceImage | None:
        """Download ``url`` and normalize it to JPEG."""
        if not url:
            return None

        try:
            client = await self._get_http_client()
            response = await client.get(url)
            response.raise_for_status()
            data = to_jpeg(response.content)
        except (httpx.HTTPError, UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            logger.warning(f"Could not load reference image {url}: {e}")
            return None

        return ReferenceImage(data=data, mime_type="image/jpeg")
