"""
Spoken scripts for the workout and diet sections of a stored plan.

Stored plans are plain dicts; every subfield may be missing or malformed.
"""


def format_workout_for_speech(workout_plan) -> str:
    """Script for the first workout day."""
    if not workout_plan or not isinstance(workout_plan, list):
        return "You have no workouts scheduled."

    day = workout_plan[0]
    if not day or not isinstance(day, dict):
        return "Workout data is incomplete."

    script = (
        f"Here is your workout plan for {day.get('day') or 'Day 1'}. "
        f"The focus is {day.get('focus') or 'General Fitness'}. "
    )

    exercises = day.get("exercises")
    if isinstance(exercises, list):
        for i, ex in enumerate(exercises, start=1):
            if not isinstance(ex, dict):
                continue
            script += f"Exercise {i}: {ex.get('name')}. Do {ex.get('sets')} sets of {ex.get('reps')} repetitions. "
            if ex.get("notes"):
                script += f"Tip: {ex['notes']}. "

    return script


def _meal_name(meal):
    return meal.get("name") if isinstance(meal, dict) else None


def format_diet_for_speech(diet_plan) -> str:
    """Script for the daily meals."""
    if not diet_plan or not isinstance(diet_plan, dict):
        return "No diet plan available."

    script = "Here is your nutrition plan. "
    for label, key in (("Breakfast", "breakfast"), ("Lunch", "lunch"), ("Dinner", "dinner")):
        name = _meal_name(diet_plan.get(key))
        if name:
            script += f"For {label}, have {name}. "

    snacks = diet_plan.get("snacks")
    if isinstance(snacks, list):
        names = [n for n in (_meal_name(s) for s in snacks) if n]
        if names:
            script += f"For snacks, you can have {' or '.join(names)}. "

    return script


NARRATORS = {
    "workout": lambda plan: format_workout_for_speech(plan.get("workoutPlan")),
    "diet": lambda plan: format_diet_for_speech(plan.get("dietPlan")),
}


def narrate(plan: dict, section: str) -> str:
    """Script for a named section ("workout" or "diet")."""
    return NARRATORS[section](plan or {})
