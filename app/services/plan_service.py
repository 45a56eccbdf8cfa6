"""
Workout + diet plan generation.
"""
import json

from pydantic import ValidationError

from app.core.logger import logger, log_error
from app.models.plan import FitnessPlan
from app.models.profile import UserProfile
from app.models.schemas import PlanResult
from app.services import llm_service


PLAN_ERROR = "Failed to generate plan"

PLAN_SYSTEM_PROMPT = """
You are an elite Fitness Coach & Nutritionist.
Generate a strictly valid JSON response containing a 'workoutPlan' and 'dietPlan' based on the user's profile.

CRITICAL OUTPUT STRUCTURE:
You must return a JSON object with EXACTLY this structure:
{
  "workoutPlan": [
    {
      "day": "Monday",
      "focus": "Push Day",
      "exercises": [
        { "name": "Bench Press", "sets": 3, "reps": "10-12", "rest": "60s", "notes": "Focus on chest" }
      ]
    }
  ],
  "dietPlan": {
    "breakfast": { "name": "Oats", "calories": "400 kcal", "ingredients": ["Oats", "Milk"], "macros": "20g Protein" },
    "lunch": { "name": "Chicken Salad", "calories": "600 kcal", "ingredients": ["Chicken", "Lettuce"], "macros": "40g Protein" },
    "dinner": { "name": "Fish", "calories": "500 kcal", "ingredients": ["Fish", "Rice"], "macros": "30g Protein" },
    "snacks": [
      { "name": "Apple", "calories": "100 kcal", "ingredients": ["Apple"], "macros": "20g Carbs" }
    ]
  }
}

RULES:
1. Include one workoutPlan entry per training day the user asked for.
2. "sets" is a number; "reps", "rest" and "calories" are strings.
3. Do NOT include motivation or tips in this response.
4. Output JSON only. No commentary, no markdown.
"""


def build_plan_prompt(profile: UserProfile) -> str:
    """User message: full profile plus the two fields that steer content."""
    return f"""
User Profile: {json.dumps(profile.to_prompt_json())}

Requirements:
1. Workout: Detailed sets, reps, and rest times tailored to their goal ({profile.goal}).
2. Diet: Specific meals with macros tailored to their dietary preference ({profile.dietaryPreference}).
"""


async def generate_plan(profile: UserProfile) -> PlanResult:
    """
    Generate a personalized workout + diet plan.

    Provider errors, empty or non-JSON answers and answers that do not match
    the FitnessPlan shape all yield the same failure result; details are
    logged only.

    Returns:
        PlanResult with data on success, error message otherwise
    """
    logger.info(f"Generating core plan for: {profile.name}")

    try:
        raw = await llm_service.call_json_api(PLAN_SYSTEM_PROMPT, build_plan_prompt(profile))
        plan = FitnessPlan.model_validate(raw)
    except ValidationError as e:
        log_error("Plan shape validation", e)
        return PlanResult(success=False, error=PLAN_ERROR)
    except Exception as e:
        log_error("Plan generation", e)
        return PlanResult(success=False, error=PLAN_ERROR)

    logger.info(f"Plan generated: {len(plan.workoutPlan)} workout days")
    return PlanResult(success=True, data=plan)
