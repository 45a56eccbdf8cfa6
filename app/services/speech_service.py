"""
Text-to-speech via the ElevenLabs streaming API.
"""
import base64

import httpx

from app.core.config import settings
from app.core.logger import logger, log_ai_call, log_error
from app.models.schemas import SpeechResult


SPEECH_ERROR = "Failed to generate speech"


def _http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.SPEECH_TIMEOUT)


async def stream_speech(text: str) -> list[bytes]:
    """
    Stream synthesized audio from ElevenLabs.

    Returns:
        Audio chunks in arrival order

    Raises:
        RuntimeError: If no ElevenLabs credential is configured
        httpx.HTTPError: If the request fails
    """
    if not settings.ELEVENLABS_API_KEY:
        raise RuntimeError("Missing ElevenLabs API Key")

    log_ai_call("Text to speech", settings.ELEVENLABS_MODEL_ID)

    url = f"{settings.ELEVENLABS_BASE_URL}/text-to-speech/{settings.ELEVENLABS_VOICE_ID}/stream"
    chunks = []

    async with _http_client() as client:
        async with client.stream(
            "POST",
            url,
            params={"output_format": settings.ELEVENLABS_OUTPUT_FORMAT},
            headers={"xi-api-key": settings.ELEVENLABS_API_KEY},
            json={"text": text, "model_id": settings.ELEVENLABS_MODEL_ID},
        ) as response:
            response.raise_for_status()
            async for chunk in response.aiter_bytes():
                chunks.append(chunk)

    return chunks


async def generate_speech(text: str) -> SpeechResult:
    """
    Synthesize speech for a block of plan text.

    The whole clip is buffered and returned as an mp3 data URI. A missing
    credential or any provider error yields the failure result.
    """
    try:
        chunks = await stream_speech(text)
        audio = b"".join(chunks)
        if not audio:
            raise ValueError("Empty audio stream")

        logger.info(f"Speech generated: {len(audio)} bytes in {len(chunks)} chunks")
        encoded = base64.b64encode(audio).decode("ascii")
        return SpeechResult(success=True, audio=f"data:audio/mp3;base64,{encoded}")

    except Exception as e:
        log_error("Speech generation", e)
        return SpeechResult(success=False, error=SPEECH_ERROR)
