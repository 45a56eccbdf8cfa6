"""
Exercise and meal visualization with a two-tier provider fallback.
"""
import base64
from typing import Literal
from urllib.parse import quote

from app.core.config import settings
from app.core.logger import logger, log_error, log_fallback
from app.models.schemas import ImageResult
from app.services import gemini_service


IMAGE_ERROR = "Failed to generate image"

PROMPT_CONTEXT = {
    "workout": "gym workout, fitness, high quality, 4k, athletic person doing",
    "food": "gourmet food, delicious, michelin star, 8k, professional photography of",
}


def build_image_prompt(description: str, image_type: Literal["workout", "food"]) -> str:
    return f"{PROMPT_CONTEXT[image_type]} {description}"


def fallback_image_url(prompt: str) -> str:
    """Pollinations URL for the prompt. Not fetched or validated here."""
    return settings.FALLBACK_IMAGE_URL.format(prompt=quote(prompt, safe=""))


async def generate_image(description: str, image_type: Literal["workout", "food"]) -> ImageResult:
    """
    Generate an image for an exercise or meal name.

    Attempt 1: Gemini inline image, returned as a PNG data URI.
    Attempt 2: fallback provider URL, returned with degraded=True. Used when
    attempt 1 raises or answers without an inline image part.
    """
    try:
        prompt = build_image_prompt(description, image_type)

        try:
            image_bytes = await gemini_service.generate_inline_image(prompt)
            if image_bytes:
                encoded = base64.b64encode(image_bytes).decode("ascii")
                return ImageResult(success=True, image=f"data:image/png;base64,{encoded}")
            log_fallback("Image generation")
        except Exception as e:
            log_fallback("Image generation", e)

        url = fallback_image_url(prompt)
        logger.info(f"Serving fallback image for: {description}")
        return ImageResult(success=True, degraded=True, image=url)

    except Exception as e:
        log_error("Image generation", e)
        return ImageResult(success=False, error=IMAGE_ERROR)
