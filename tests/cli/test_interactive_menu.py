"""Tests for the interactive loop.

Prompt answers are fed through a patched ``Prompt.ask``; the loop drives a
real ContentSession built on mocks with image generation turned off.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from besselchu.cli.interactive.commands import _interactive_loop
from besselchu.content.models import ContentGenerationError
from besselchu.session import ContentSession
from besselchu.session.session import GENERATION_ERROR_MESSAGE, SEARCH_ERROR_MESSAGE

COMMANDS = "besselchu.cli.interactive.commands"


@pytest.fixture
def session(bestseller_result, post_content):
    bestseller_service = MagicMock()
    bestseller_service.get_bestsellers = AsyncMock(return_value=bestseller_result)
    bestseller_service.close = AsyncMock()

    content_generator = MagicMock()
    content_generator.generate = AsyncMock(return_value=post_content)

    image_generator = MagicMock()
    image_generator.close = AsyncMock()

    return ContentSession(
        bestseller_service=bestseller_service,
        content_generator=content_generator,
        image_generator=image_generator,
        scene_batch_generator=MagicMock(),
        generate_images=False,
    )


async def run_loop(session, tmp_path, answers):
    with patch(f"{COMMANDS}.Prompt.ask", side_effect=answers) as ask:
        await _interactive_loop(session, tmp_path)
    return ask


# =============================================================================
# Error state
# =============================================================================

class TestErrorState:
    """Test how the loop leaves the ERROR state."""

    @pytest.mark.asyncio
    async def test_error_with_books_returns_to_list(self, session, tmp_path):
        session.content_generator.generate.side_effect = ContentGenerationError()

        with patch(f"{COMMANDS}.print_error") as print_error:
            ask = await run_loop(session, tmp_path, ["1", "p", "q"])

        print_error.assert_called_once_with(GENERATION_ERROR_MESSAGE)
        assert ask.call_count == 3
        assert session.error is None
        session.bestseller_service.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_error_without_books_quits(self, session, tmp_path):
        session.bestseller_service.get_bestsellers.side_effect = RuntimeError("offline")

        with patch(f"{COMMANDS}.print_error") as print_error:
            await run_loop(session, tmp_path, ["q"])

        print_error.assert_called_once_with(SEARCH_ERROR_MESSAGE)
        session.bestseller_service.get_bestsellers.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_error_without_books_retries(self, session, tmp_path, bestseller_result):
        session.bestseller_service.get_bestsellers.side_effect = [RuntimeError("offline"), bestseller_result]

        with patch(f"{COMMANDS}.print_error"):
            await run_loop(session, tmp_path, ["r", "q"])

        assert session.bestseller_service.get_bestsellers.await_count == 2
        assert session.books == bestseller_result.books


# =============================================================================
# Result menu
# =============================================================================

class TestResultMenu:
    """Test the actions offered after content is generated."""

    @pytest.mark.asyncio
    async def test_back_to_list_keeps_books(self, session, tmp_path):
        await run_loop(session, tmp_path, ["1", "p", "b", "q"])

        session.bestseller_service.get_bestsellers.assert_awaited_once()
        assert session.result is None
        assert session.books

    @pytest.mark.asyncio
    async def test_new_search_fetches_again(self, session, tmp_path):
        await run_loop(session, tmp_path, ["1", "p", "n", "q"])

        assert session.bestseller_service.get_bestsellers.await_count == 2

    @pytest.mark.asyncio
    async def test_quit_from_result(self, session, tmp_path, post_content):
        ask = await run_loop(session, tmp_path, ["1", "p", "q"])

        assert ask.call_count == 3
        assert session.result == post_content
        session.image_generator.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_copy_image_prompt(self, session, tmp_path):
        with patch("besselchu.services.share.pyperclip.copy") as copy:
            await run_loop(session, tmp_path, ["1", "p", "i", "q"])

        copy.assert_called_once_with("A book on a desk")

    @pytest.mark.asyncio
    async def test_save_failure_keeps_menu_open(self, session, tmp_path):
        with patch(f"{COMMANDS}.ShareService") as service_cls, \
             patch(f"{COMMANDS}.print_error") as print_error:
            service_cls.return_value.share = AsyncMock(side_effect=OSError("disk full"))
            ask = await run_loop(session, tmp_path, ["1", "p", "s", "q"])

        print_error.assert_called_once_with(
            "Could not save the generated content", {"reason": "disk full"}
        )
        assert ask.call_count == 4
        assert not any(tmp_path.iterdir())

    @pytest.mark.asyncio
    async def test_save_writes_output(self, session, tmp_path):
        with patch("besselchu.services.share.pyperclip.copy"):
            await run_loop(session, tmp_path, ["1", "p", "s", "q"])

        saved = list(tmp_path.rglob("caption.txt"))
        assert len(saved) == 1
