"""
Pydantic models for the generated fitness plan and motivation block.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExerciseItem(BaseModel):
    """Single exercise in a workout day."""

    # Models sometimes answer "reps": 12 instead of "12"
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(..., min_length=1)
    sets: int
    reps: str
    rest: str
    notes: Optional[str] = None


class WorkoutDay(BaseModel):
    """One training day."""

    day: str
    focus: str
    exercises: list[ExerciseItem]


class MealItem(BaseModel):
    """Single meal in the diet plan."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(..., min_length=1)
    calories: str
    ingredients: list[str]
    macros: str


class DietPlan(BaseModel):
    """Daily diet plan."""

    breakfast: MealItem
    lunch: MealItem
    dinner: MealItem
    snacks: list[MealItem] = []

    @field_validator("snacks", mode="before")
    @classmethod
    def _missing_snacks_are_empty(cls, value):
        return [] if value is None else value


class FitnessPlan(BaseModel):
    """Generated workout + diet document."""

    workoutPlan: list[WorkoutDay] = Field(..., min_length=1)
    dietPlan: DietPlan


class Motivation(BaseModel):
    """Motivation block: a quote and exactly three tips."""

    quote: str = Field(..., min_length=1)
    tips: list[str] = Field(..., min_length=3, max_length=3)

    @field_validator("quote")
    @classmethod
    def _quote_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("quote must not be blank")
        return value


FALLBACK_MOTIVATION = Motivation(
    quote="Consistency is the key to everything.",
    tips=["Drink water now", "Fix your posture", "Take a deep breath"],
)
