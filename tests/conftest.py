"""Shared test fixtures and configuration.

Provides books, canned model answers and async-compatible mocks for the
providers so that no test touches the network.
"""

from __future__ import annotations

import json
from io import BytesIO
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from besselchu.bestsellers.models import BestsellerResult, Book
from besselchu.content.models import ContentType, GeneratedContent, Scene


# =============================================================================
# Books
# =============================================================================

@pytest.fixture
def sample_book() -> Book:
    return Book(
        title="불편한 편의점",
        author="김호연",
        description="따뜻한 위로를 전하는 감동 소설",
        rank=1,
        keyword="소설",
        isbn="9788936434267",
        cover_url="https://image.aladin.co.kr/product/27338/6/cover500/k222835565_1.jpg",
        cover_description='"불편한 편의점" book cover',
    )


@pytest.fixture
def sample_books(sample_book: Book) -> list[Book]:
    second = Book(
        title="역행자",
        author="자청",
        description="돈과 시간으로부터 자유로워지는 방법",
        rank=2,
        keyword="자기계발",
        isbn="9791168473690",
        cover_url="https://image.aladin.co.kr/product/29354/32/cover500/k552835893_1.jpg",
    )
    return [sample_book, second]


@pytest.fixture
def bestseller_result(sample_books: list[Book]) -> BestsellerResult:
    return BestsellerResult(
        books=sample_books,
        source_urls=["http://www.aladin.co.kr/shop/common/wbest.aspx"],
    )


# =============================================================================
# Canned model answers
# =============================================================================

@pytest.fixture
def post_json() -> str:
    return json.dumps({
        "caption": "오늘 소개할 책은 불편한 편의점입니다.",
        "hashtags": "#책스타그램 #불편한편의점 #책추천",
        "imagePrompt": "The book cover centered on a wooden desk with coffee",
    }, ensure_ascii=False)


def make_reels_json(scene_count: int) -> str:
    scenes = [
        {
            "sceneNumber": i + 10,  # deliberately wrong, generator renumbers
            "timeRange": f"{i * 6}-{(i + 1) * 6}s",
            "visualDescription": f"장면 {i + 1}",
            "audioScript": f"내레이션 {i + 1}",
            "imagePrompt": f"Scene {i + 1} with the book cover",
        }
        for i in range(scene_count)
    ]
    return json.dumps({"scenes": scenes}, ensure_ascii=False)


@pytest.fixture
def reels_json() -> str:
    return make_reels_json(5)


@pytest.fixture
def reels_json_factory():
    return make_reels_json


@pytest.fixture
def post_content() -> GeneratedContent:
    return GeneratedContent(
        type=ContentType.INSTAGRAM_POST,
        content="Caption\n\n#책스타그램",
        hashtags=["#책스타그램"],
        image_prompt="A book on a desk",
        original_cover_url="https://example.com/cover.jpg",
    )


@pytest.fixture
def reels_content() -> GeneratedContent:
    scenes = [
        Scene(
            scene_number=i + 1,
            time_range=f"{i * 6}-{(i + 1) * 6}s",
            visual_description=f"visual {i + 1}",
            audio_script=f"audio {i + 1}",
            image_prompt=f"prompt {i + 1}",
        )
        for i in range(4)
    ]
    return GeneratedContent(
        type=ContentType.REELS_SCRIPT,
        content="scenes",
        scenes=scenes,
    )


# =============================================================================
# Images
# =============================================================================

def make_image_bytes(size: tuple[int, int] = (64, 96), fmt: str = "PNG", color=(200, 120, 40)) -> bytes:
    output = BytesIO()
    Image.new("RGB", size, color).save(output, format=fmt)
    return output.getvalue()


@pytest.fixture
def image_bytes_factory():
    return make_image_bytes


@pytest.fixture
def png_bytes() -> bytes:
    return make_image_bytes()


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_image_bytes(fmt="JPEG")


# =============================================================================
# Provider mocks
# =============================================================================

@pytest.fixture
def mock_text_provider(post_json: str) -> AsyncMock:
    """Create a mock TextProvider returning a valid post answer."""
    provider = AsyncMock()
    provider.generate.return_value = post_json
    provider.current_provider = "mock"
    return provider


@pytest.fixture
def mock_image_provider(jpeg_bytes: bytes) -> AsyncMock:
    """Create a mock ImageProvider returning a small JPEG."""
    provider = AsyncMock()
    provider.generate.return_value = jpeg_bytes
    provider.current_provider = "mock"
    return provider


@pytest.fixture
def mock_reference_loader() -> MagicMock:
    """Reference loader that never finds a cover."""
    loader = MagicMock()
    loader.load = AsyncMock(return_value=None)
    loader.close = AsyncMock()
    return loader


@pytest.fixture
def test_output_dir(tmp_path: Path) -> Path:
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir
