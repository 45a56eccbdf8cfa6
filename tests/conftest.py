"""
Pytest fixtures for the AI Fitness Coach tests.
"""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch, AsyncMock

# Mock environment variables before importing app
import os
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")
os.environ.setdefault("ELEVENLABS_API_KEY", "test-elevenlabs-key")
os.environ["TEXT_PROVIDER"] = "gemini"
os.environ["SESSION_BACKEND"] = "memory"
os.environ["APP_API_SECRET"] = ""
os.environ["AI_MAX_ATTEMPTS"] = "1"

from app.main import app
from app.core.limiter import limiter
from app.services.session_store import InMemorySessionStore


@pytest.fixture
def client():
    """Create a test client for the FastAPI app with a clean session store."""
    limiter.enabled = False
    InMemorySessionStore.reset_all()
    yield TestClient(app)
    InMemorySessionStore.reset_all()
    limiter.enabled = True


@pytest.fixture
def mock_json_api():
    """Mock the shared text-generation call."""
    with patch("app.services.llm_service.call_json_api", new_callable=AsyncMock) as mock:
        yield mock


@pytest.fixture
def sample_profile():
    """Valid intake profile as submitted by the form."""
    return {
        "name": "Sam",
        "age": 29,
        "gender": "Male",
        "height": 180,
        "weight": 80,
        "goal": "Muscle Gain",
        "level": "Intermediate",
        "location": "Gym",
        "dietaryPreference": "Non-Vegetarian",
        "daysPerWeek": 4
    }


@pytest.fixture
def sample_plan():
    """Well-formed plan as returned by the text model."""
    return {
        "workoutPlan": [
            {
                "day": "Monday",
                "focus": "Push Day",
                "exercises": [
                    {"name": "Bench Press", "sets": 4, "reps": "8-10", "rest": "90s", "notes": "Control the descent"},
                    {"name": "Overhead Press", "sets": 3, "reps": "10-12", "rest": "60s"}
                ]
            },
            {
                "day": "Tuesday",
                "focus": "Pull Day",
                "exercises": [
                    {"name": "Deadlift", "sets": 3, "reps": "5", "rest": "120s"}
                ]
            }
        ],
        "dietPlan": {
            "breakfast": {"name": "Egg Omelette", "calories": "450 kcal", "ingredients": ["Eggs", "Spinach"], "macros": "30g Protein"},
            "lunch": {"name": "Chicken Rice Bowl", "calories": "700 kcal", "ingredients": ["Chicken", "Rice"], "macros": "45g Protein"},
            "dinner": {"name": "Salmon", "calories": "600 kcal", "ingredients": ["Salmon", "Potatoes"], "macros": "40g Protein"},
            "snacks": [
                {"name": "Greek Yogurt", "calories": "150 kcal", "ingredients": ["Yogurt"], "macros": "15g Protein"},
                {"name": "Almonds", "calories": "200 kcal", "ingredients": ["Almonds"], "macros": "18g Fat"}
            ]
        }
    }


@pytest.fixture
def sample_motivation():
    """Well-formed motivation block."""
    return {
        "quote": "Sweat now, shine later.",
        "tips": ["Do 20 squats", "Refill your bottle", "Plan tomorrow's session"]
    }
