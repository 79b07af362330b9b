"""Prompt templates for book content generation."""

from __future__ import annotations

from ..bestsellers.models import Book

POST_SYSTEM_PROMPT = """You are a professional "Book Curator" or "Bookstore Editor" creating Instagram posts.

TONE GUIDE:
- Do NOT write a personal review ("I read this", "I felt", "My opinion is").
- Write a formal yet engaging "Book Introduction" or "Recommendation".
- Be objective, informative and curatorial.
- Use polite Korean "존댓말" (~해요, ~입니다).
- Focus on the book's themes, its popularity and who should read it."""

REELS_SYSTEM_PROMPT = "You are a viral content creator specializing in short-form video content."

POST_USER_TEMPLATE = """Create an Instagram Post for the book "{title}" by {author}.
The book is currently a bestseller in Korea.
{visual_context}
Return a JSON object with exactly these fields:
- "caption": the post caption in Korean, structured as Hook, Body and Closing.
- "hashtags": a single string of 10-15 relevant Korean hashtags.
- "imagePrompt": an English image-generation prompt that displays the book cover clearly in the center as the hero object, in an artistic style (soft lighting, wooden desk, coffee, or a minimalist background).

Respond with JSON only."""

REELS_USER_TEMPLATE = """Create a 30-second Instagram Reels script for the book "{title}" by {author}.
The book is currently a bestseller in Korea.
{visual_context}
The script must have 4-5 scenes. Return a JSON object in this format:
{{
  "scenes": [
    {{
      "sceneNumber": 1,
      "timeRange": "0-5s",
      "visualDescription": "what is shown on screen (Korean)",
      "audioScript": "voiceover line (Korean)",
      "imagePrompt": "English image prompt; if the scene mentions the book, include the book cover prominently"
    }}
  ]
}}

Respond with JSON only."""

# Used by the image generator when a cover reference is attached
POST_IMAGE_REFERENCE_TEMPLATE = """[Reference Image: Book cover for "{book_title}"]

Create a beautiful Instagram post image featuring this book.

IMPORTANT:
- Include the book cover from the reference image, clearly visible and faithful to the original.
- Place the book on an aesthetic surface (wooden table, marble counter or a cozy reading nook).
- Add atmospheric elements: soft natural lighting, a cup of coffee or tea, reading glasses, a bookmark, a cozy blanket, plants.
- Style: professional product photography with an Instagram aesthetic, warm and inviting.

Scene idea: {prompt}"""

SCENE_IMAGE_REFERENCE_TEMPLATE = """[Reference Image Provided]

Instruction: Generate a scene for a video storyboard.
CRITICAL: If the book is present in the scene, it MUST look exactly like the reference image provided. Maintain the cover art and title text fidelity.

Prompt: {prompt}"""


def _visual_context(book: Book) -> str:
    if not book.cover_description:
        return ""
    return f'Visual context: The book cover looks like: "{book.cover_description}".\n'


def build_post_prompt(book: Book) -> str:
    """User prompt for an Instagram post about ``book``."""
    return POST_USER_TEMPLATE.format(
        title=book.title,
        author=book.author,
        visual_context=_visual_context(book),
    )


def build_reels_prompt(book: Book) -> str:
    """User prompt for a Reels storyboard about ``book``."""
    return REELS_USER_TEMPLATE.format(
        title=book.title,
        author=book.author,
        visual_context=_visual_context(book),
    )


def build_post_image_prompt(prompt: str, book_title: str | None) -> str:
    return POST_IMAGE_REFERENCE_TEMPLATE.format(
        book_title=book_title or "the book",
        prompt=prompt,
    )


def build_scene_image_prompt(prompt: str) -> str:
    return SCENE_IMAGE_REFERENCE_TEMPLATE.format(prompt=prompt)
