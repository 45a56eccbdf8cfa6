"""
Text-generation entry point shared by the plan and motivation generators.

Dispatches to the configured provider (Gemini or OpenAI) and parses the JSON
answer.
"""
import json
import logging

import httpx
import openai
from google.genai import errors as genai_errors
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)

from app.core.config import settings
from app.core.logger import logger, log_error
from app.services import gemini_service, openai_service


TRANSIENT_ERRORS = (
    openai.RateLimitError,
    openai.APIConnectionError,
    genai_errors.ServerError,
    httpx.TransportError,
)

# Tenacity retry policy: AI_MAX_ATTEMPTS total attempts (default 1, no retry),
# exponential backoff 2s→10s, transient errors only
_provider_retry = retry(
    stop=stop_after_attempt(max(settings.AI_MAX_ATTEMPTS, 1)),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    retry=retry_if_exception_type(TRANSIENT_ERRORS),
    before_sleep=before_sleep_log(logging.getLogger(__name__), logging.WARNING),
    reraise=True,
)


def _provider():
    if settings.TEXT_PROVIDER == "openai":
        return openai_service
    return gemini_service


@_provider_retry
async def call_json_api(
    system_prompt: str | None,
    user_prompt: str,
    temperature: float = settings.TEMPERATURE_CREATIVE
) -> dict:
    """
    Generate text in JSON mode and parse it.

    Args:
        system_prompt: System instruction, or None
        user_prompt: User request
        temperature: Model temperature

    Returns:
        Parsed JSON object

    Raises:
        ValueError: If the response is empty or not a JSON object
        Provider errors are re-raised unchanged
    """
    text = await _provider().generate_text(system_prompt, user_prompt, temperature)

    if not text or not text.strip():
        raise ValueError("No text returned from AI")

    try:
        result = json.loads(text)
    except json.JSONDecodeError as e:
        log_error("Text API JSON parsing", e)
        raise ValueError("AI did not return valid JSON")

    if not isinstance(result, dict):
        raise ValueError("AI did not return a JSON object")

    logger.info("Text API call successful")
    return result
