"""
Google Gemini API service for text and image generation.
"""
from functools import lru_cache

from google import genai
from google.genai import types

from app.core.config import settings
from app.core.logger import log_ai_call


@lru_cache(maxsize=4)
def _client(api_key: str) -> genai.Client:
    return genai.Client(api_key=api_key)


def get_client() -> genai.Client:
    """
    Shared Gemini client, created on first use.

    Raises:
        RuntimeError: If no Gemini credential is configured
    """
    if not settings.GEMINI_API_KEY:
        raise RuntimeError("Missing Gemini API Key")
    return _client(settings.GEMINI_API_KEY)


async def generate_text(system_prompt: str | None, user_prompt: str, temperature: float) -> str | None:
    """
    Call Gemini in JSON output mode.

    Args:
        system_prompt: Optional system instruction
        user_prompt: User request
        temperature: Model temperature

    Returns:
        Raw response text (may be None or empty)
    """
    log_ai_call("Gemini text", settings.GEMINI_TEXT_MODEL)

    response = await get_client().aio.models.generate_content(
        model=settings.GEMINI_TEXT_MODEL,
        contents=user_prompt,
        config=types.GenerateContentConfig(
            system_instruction=system_prompt,
            response_mime_type="application/json",
            temperature=temperature,
        ),
    )
    return response.text


async def generate_inline_image(prompt: str) -> bytes | None:
    """
    Ask the multimodal image model for an inline image.

    Scans every candidate for the first part that carries inline image bytes.

    Returns:
        Image bytes, or None when the response has no inline image part
    """
    log_ai_call("Gemini image", settings.GEMINI_IMAGE_MODEL)

    response = await get_client().aio.models.generate_content(
        model=settings.GEMINI_IMAGE_MODEL,
        contents=prompt,
    )

    for candidate in response.candidates or []:
        content = candidate.content
        if not content or not content.parts:
            continue
        for part in content.parts:
            if part.inline_data and part.inline_data.data:
                return part.inline_data.data
    return None
