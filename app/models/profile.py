"""
Pydantic model for the user's fitness/diet intake profile.
Provides runtime validation, numeric coercion and auto-documentation.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class FitnessGoal(str, Enum):
    WEIGHT_LOSS = "Weight Loss"
    MUSCLE_GAIN = "Muscle Gain"
    ENDURANCE = "Endurance Training"
    GENERAL_FITNESS = "General Fitness"
    FLEXIBILITY = "Flexibility & Mobility"


class FitnessLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class WorkoutLocation(str, Enum):
    GYM = "Gym"
    HOME_NO_EQUIPMENT = "Home (No Equipment)"
    HOME_DUMBBELLS = "Home (Dumbbells/Bands)"
    OUTDOOR = "Outdoor"


class DietaryPreference(str, Enum):
    VEGETARIAN = "Vegetarian"
    NON_VEGETARIAN = "Non-Vegetarian"
    VEGAN = "Vegan"
    KETO = "Keto"
    PALEO = "Paleo"
    NO_PREFERENCE = "No Preference"


class StressLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class UserProfile(BaseModel):
    """Submitted intake profile. Frozen once validated."""

    model_config = ConfigDict(
        frozen=True,
        use_enum_values=True,
        json_schema_extra={
            "example": {
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
        },
    )

    name: str = Field(..., min_length=2, description="Name must be at least 2 characters.")
    age: float = Field(..., ge=10, le=100)
    gender: Gender
    height: float = Field(..., ge=50, description="Height in cm")
    weight: float = Field(..., ge=20, description="Weight in kg")
    goal: FitnessGoal
    level: FitnessLevel
    location: WorkoutLocation
    dietaryPreference: DietaryPreference
    daysPerWeek: float = Field(default=3, ge=1, le=7)
    medicalHistory: Optional[str] = Field(None, description="Injuries, conditions, medications")
    stressLevel: Optional[StressLevel] = None

    @field_validator("age", "daysPerWeek")
    @classmethod
    def _whole_numbers_as_int(cls, value: float):
        # "29" and 29.0 become 29; fractional input such as "29.5" stays a float
        return int(value) if value.is_integer() else value

    def to_prompt_json(self) -> dict:
        """Profile as sent to the text model (unset optional fields omitted)."""
        return self.model_dump(mode="json", exclude_none=True)
