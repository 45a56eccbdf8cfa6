"""
OpenAI API service, the alternative text-generation backend.
"""
from functools import lru_cache

import openai
from openai import AsyncOpenAI

from app.core.config import settings
from app.core.logger import log_ai_call


# Per-call timeout: 10s to connect, 90s to receive response.
OPENAI_TIMEOUT = openai.Timeout(90.0, connect=10.0, read=90.0, write=10.0)


@lru_cache(maxsize=4)
def _client(api_key: str) -> AsyncOpenAI:
    return AsyncOpenAI(api_key=api_key)


def get_client() -> AsyncOpenAI:
    """
    Shared OpenAI client, created on first use.

    Raises:
        RuntimeError: If no OpenAI credential is configured
    """
    if not settings.OPENAI_API_KEY:
        raise RuntimeError("Missing OpenAI API Key")
    return _client(settings.OPENAI_API_KEY)


async def generate_text(system_prompt: str | None, user_prompt: str, temperature: float) -> str | None:
    """
    Call OpenAI Chat API in JSON mode.

    Args:
        system_prompt: Optional system context
        user_prompt: User request
        temperature: Model temperature

    Returns:
        Raw message content (may be None or empty)
    """
    log_ai_call("Chat API", settings.OPENAI_MODEL)

    messages = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": user_prompt})

    response = await get_client().chat.completions.create(
        model=settings.OPENAI_MODEL,
        messages=messages,
        temperature=temperature,
        response_format={"type": "json_object"},
        timeout=OPENAI_TIMEOUT,
    )
    return response.choices[0].message.content
