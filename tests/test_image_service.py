"""
Tests for image generation and its fallback tier.
"""
import asyncio
import base64
import re
from unittest.mock import patch, AsyncMock
from urllib.parse import quote

from app.services.image_service import generate_image, build_image_prompt, fallback_image_url

GEMINI = "app.services.image_service.gemini_service.generate_inline_image"


class TestBuildImagePrompt:
    """Tests for the type-specific prompt prefix."""

    def test_workout_prefix(self):
        assert build_image_prompt("Bench Press", "workout") == (
            "gym workout, fitness, high quality, 4k, athletic person doing Bench Press"
        )

    def test_food_prefix(self):
        assert build_image_prompt("Oats", "food") == (
            "gourmet food, delicious, michelin star, 8k, professional photography of Oats"
        )


class TestGenerateImage:
    """Tests for the generate_image function."""

    def test_inline_image_becomes_data_uri(self):
        png = b"\x89PNG\r\n\x1a\nfake-image"

        with patch(GEMINI, new_callable=AsyncMock, return_value=png) as mock:
            result = asyncio.run(generate_image("Bench Press", "workout"))

        assert result.success is True
        assert result.degraded is False
        assert re.fullmatch(r"data:image/png;base64,[A-Za-z0-9+/]+=*", result.image)
        assert base64.b64decode(result.image.split(",", 1)[1]) == png
        mock.assert_awaited_once_with(build_image_prompt("Bench Press", "workout"))

    def test_provider_error_falls_back_to_url(self):
        with patch(GEMINI, new_callable=AsyncMock, side_effect=RuntimeError("quota exceeded")):
            result = asyncio.run(generate_image("Bench Press", "workout"))

        prompt = build_image_prompt("Bench Press", "workout")
        assert result.success is True
        assert result.degraded is True
        assert result.image.startswith("https://image.pollinations.ai/prompt/")
        assert quote(prompt, safe="") in result.image
        assert result.image.endswith("?nologo=true")

    def test_missing_image_part_falls_back_to_url(self):
        with patch(GEMINI, new_callable=AsyncMock, return_value=None):
            result = asyncio.run(generate_image("Grilled Salmon", "food"))

        assert result.success is True
        assert result.degraded is True
        assert result.image == fallback_image_url(build_image_prompt("Grilled Salmon", "food"))

    def test_fallback_url_encodes_special_characters(self):
        url = fallback_image_url("curls & presses/rows?")

        assert url == "https://image.pollinations.ai/prompt/curls%20%26%20presses%2Frows%3F?nologo=true"

    def test_outer_failure_returns_error(self):
        with patch("app.services.image_service.build_image_prompt", side_effect=KeyError("statue")):
            result = asyncio.run(generate_image("Bench Press", "workout"))

        assert result.success is False
        assert result.error == "Failed to generate image"
        assert result.image is None
