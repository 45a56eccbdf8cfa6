"""
Configuration and constants for the AI Fitness Coach service.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Text generation provider: "gemini" or "openai"
    TEXT_PROVIDER: str = os.getenv("TEXT_PROVIDER", "gemini").lower()

    # Gemini Configuration
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_TEXT_MODEL: str = os.getenv("GEMINI_TEXT_MODEL", "gemini-2.5-flash")
    GEMINI_IMAGE_MODEL: str = os.getenv("GEMINI_IMAGE_MODEL", "gemini-2.5-flash-image")

    # OpenAI Configuration
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4.1-mini")

    # ElevenLabs Configuration
    ELEVENLABS_API_KEY: str = os.getenv("ELEVENLABS_API_KEY", "")
    ELEVENLABS_BASE_URL: str = "https://api.elevenlabs.io/v1"
    ELEVENLABS_VOICE_ID: str = os.getenv("ELEVENLABS_VOICE_ID", "JBFqnCBsd6RMkjVDRZzb")
    ELEVENLABS_MODEL_ID: str = os.getenv("ELEVENLABS_MODEL_ID", "eleven_multilingual_v2")
    ELEVENLABS_OUTPUT_FORMAT: str = os.getenv("ELEVENLABS_OUTPUT_FORMAT", "mp3_44100_128")
    # Whole-request read timeout; httpx's 5s default is shorter than a synthesis
    SPEECH_TIMEOUT: float = float(os.getenv("SPEECH_TIMEOUT", 60))

    # Fallback image provider, prompt is URL-encoded into the path
    FALLBACK_IMAGE_URL: str = "https://image.pollinations.ai/prompt/{prompt}?nologo=true"

    # Server Configuration
    PORT: int = int(os.getenv("PORT", 10000))
    HOST: str = os.getenv("HOST", "0.0.0.0")

    # Optional shared secret for the X-App-Secret header
    APP_API_SECRET: str = os.getenv("APP_API_SECRET", "")

    # AI Temperature Settings
    TEMPERATURE_CREATIVE: float = 0.7

    # Total attempts per text-generation call (1 = no retry)
    AI_MAX_ATTEMPTS: int = int(os.getenv("AI_MAX_ATTEMPTS", 1))

    # Motivation refresh period
    MOTIVATION_INTERVAL_SECONDS: float = float(os.getenv("MOTIVATION_INTERVAL_SECONDS", 60))

    # Session persistence: "json" or "memory"
    SESSION_BACKEND: str = os.getenv("SESSION_BACKEND", "json").lower()
    SESSION_FILE: str = os.getenv("SESSION_FILE", "data/sessions.json")

    def text_provider_key(self) -> str:
        """Name of the credential the configured text provider needs."""
        return "OPENAI_API_KEY" if self.TEXT_PROVIDER == "openai" else "GEMINI_API_KEY"

    def missing_credentials(self) -> list[str]:
        """Provider credentials that are not configured."""
        required = [self.text_provider_key(), "GEMINI_API_KEY", "ELEVENLABS_API_KEY"]
        missing = []
        for name in required:
            if not getattr(self, name) and name not in missing:
                missing.append(name)
        return missing

    def validate(self) -> list[str]:
        """
        Validate configuration on startup.

        A missing credential only disables the operations that need it, so it
        is reported rather than raised.

        Returns:
            Names of missing credentials

        Raises:
            ValueError: If TEXT_PROVIDER is not supported
        """
        if self.TEXT_PROVIDER not in ("gemini", "openai"):
            raise ValueError(
                f"Unsupported TEXT_PROVIDER '{self.TEXT_PROVIDER}'. Use 'gemini' or 'openai'."
            )
        return self.missing_credentials()


settings = Settings()
