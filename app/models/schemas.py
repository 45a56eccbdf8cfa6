"""
Pydantic models for request/response validation.
"""
from typing import Literal
from pydantic import BaseModel, Field

from app.models.plan import FitnessPlan, Motivation


# --- Operation Results ---
#
# success: the caller may use the payload
# degraded: the payload is fallback content, not generated content

class PlanResult(BaseModel):
    """Outcome of plan generation."""
    success: bool
    data: FitnessPlan | None = None
    error: str | None = None


class MotivationResult(BaseModel):
    """Outcome of motivation generation. Always carries data."""
    success: bool
    degraded: bool = False
    data: Motivation


class ImageResult(BaseModel):
    """Outcome of image generation."""
    success: bool
    degraded: bool = False
    image: str | None = None
    error: str | None = None


class SpeechResult(BaseModel):
    """Outcome of speech synthesis."""
    success: bool
    audio: str | None = None
    error: str | None = None


# --- Requests ---

class MotivationRequest(BaseModel):
    """Request model for a motivation block."""
    name: str = Field(..., min_length=1)
    goal: str = Field(..., min_length=1)


class ImageRequest(BaseModel):
    """Request model for exercise/meal visualization."""
    description: str = Field(..., min_length=1, max_length=300)
    type: Literal["workout", "food"]

    class Config:
        json_schema_extra = {
            "example": {"description": "Bench Press", "type": "workout"}
        }


class SpeechRequest(BaseModel):
    """Request model for text-to-speech."""
    text: str = Field(..., min_length=1, max_length=5000)


# --- Session / Misc ---

class SessionResponse(BaseModel):
    """Restored session: both slots, or nothing."""
    restored: bool
    plan: dict | None = None
    profile: dict | None = None


class NarrationResponse(BaseModel):
    """Spoken script for one plan section."""
    section: str
    text: str
