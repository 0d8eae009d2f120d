import json
import logging
from typing import Dict, Any, List, Optional
from sqlalchemy.orm import Session

from fitcoach.crud import fitness_plan as crud_plan
from fitcoach.crud.exercise import list_exercises
from fitcoach.models.fitness_plan import FitnessPlan
from fitcoach.models.user_profile import UserProfile
from fitcoach.services import llm_service
from fitcoach.services.llm_service import GenerationError
from fitcoach.services.nutrition_service import calculate_daily_targets

logger = logging.getLogger(__name__)

"""
Plan Service
------------
Orchestrates the generation of Fitness Plans.
1. Calculates nutrition targets from the profile.
2. Builds the exercise library reference the model may pick ids from.
3. Calls the LLM for the fitness + nutrition JSON.
4. Validates / normalises the result (unknown exercise ids are dropped).
5. Saves it as the user's new active plan.
"""

FITNESS_KEYS = ("fitness_plan_15_days", "fitness_plan_7_days")
NUTRITION_KEYS = ("nutrition_plan_7_days", "nutrition_plan_3_days")

DIFFICULTY_LABELS = {
    "very_easy": "Very easy",
    "easy": "Easy",
    "medium": "Medium",
    "hard": "Hard",
    "very_hard": "Very hard",
}

SYSTEM_PROMPT = "You are a certified personal trainer and sports nutritionist. Return strictly valid JSON."


def _library_reference(db: Session) -> str:
    lines = []
    for ex in list_exercises(db):
        lines.append(f"- {ex.id}: {ex.name} ({ex.equipment or 'bodyweight'})")
    return "\n".join(lines) if lines else "- (library empty, omit exerciseId)"


def build_plan_prompt(db: Session, profile: UserProfile, feedback: Optional[str] = None) -> str:
    targets = calculate_daily_targets(
        profile.weight, profile.height, profile.age, profile.sex, profile.activity_level, profile.goal
    )
    equipment = ", ".join(profile.equipment or []) or "Bodyweight (no equipment)"
    difficulty = DIFFICULTY_LABELS.get(profile.difficulty or "", "Medium")
    language = "European Portuguese" if (profile.language or "pt") == "pt" else "English"

    return f"""
    # CONTEXT
    - Sex: {profile.sex}, Age: {profile.age}, Weight: {profile.weight}kg, Height: {profile.height}cm
    - Goal: {profile.goal}, Activity: {profile.activity_level}
    - Equipment: {equipment}
    - Limitations: {profile.impediments or 'none'}
    - Session length: {profile.time_per_day or 45} min, Difficulty: {difficulty}
    - Daily targets: {targets['calories']} kcal, P {targets['protein_g']}g, C {targets['carbs_g']}g, F {targets['fat_g']}g
    - Water: {targets['water_ml']} ml
    - Feedback on previous plan: {feedback or 'N/A'}

    # TASK
    Create a 15-day fitness plan and a 7-day nutrition plan. Write user facing text in {language}.

    # RULES
    1. Every training day has individual warm-up exercises (~5 min total) in "warmup_exercises"
       and cool-down stretches (~5 min total) in "cooldown_exercises", each with "duration_seconds".
    2. Main exercises use "reps_or_time" such as "12 reps" or "45 sec".
    3. When an exercise exists in the library below, set "exerciseId" to its id.
    4. Never use equipment the user does not have. Respect the limitations.

    # EXERCISE LIBRARY
    {_library_reference(db)}

    === OUTPUT JSON ===
    {{
      "plan_summary": "...",
      "fitness_plan_15_days": [
        {{
          "day": 1, "is_rest_day": false, "workout_name": "...", "duration_minutes": {profile.time_per_day or 45},
          "estimated_calories_burnt": 300, "focus": "...",
          "warmup_exercises": [{{"name": "High Knees", "name_pt": "Joelhos Altos", "duration_seconds": 60}}],
          "exercises": [{{"name": "...", "name_pt": "...", "exerciseId": "...", "sets": 3, "reps_or_time": "12 reps", "equipment_used": "..."}}],
          "cooldown_exercises": [{{"name": "Quad Stretch", "name_pt": "Alongamento de Quadríceps", "duration_seconds": 45}}]
        }}
      ],
      "nutrition_plan_7_days": [
        {{
          "day": 1, "total_daily_calories": {targets['calories']}, "total_daily_macros": "P: Xg, C: Xg, F: Xg",
          "meals": [{{"meal_time": "Lunch", "description": "...", "ingredients": "...", "recipe": "...",
                      "calories": 450, "protein_g": 40, "carbs_g": 45, "fat_g": 10}}]
        }}
      ]
    }}
    """


def _first_list(data: Dict[str, Any], keys) -> Optional[List[Any]]:
    for key in keys:
        value = data.get(key)
        if isinstance(value, list) and value:
            return value
    return None


def validate_plan_data(data: Optional[Dict[str, Any]], library_ids: set) -> Dict[str, Any]:
    """
    Ensures the generated JSON has fitness and nutrition days and that
    every exerciseId points at the library. Raises GenerationError otherwise.
    """
    if not data:
        raise GenerationError("Plan generation returned no data")

    fitness_days = _first_list(data, FITNESS_KEYS)
    nutrition_days = _first_list(data, NUTRITION_KEYS)
    if not fitness_days:
        raise GenerationError("Generated plan has no fitness days")
    if not nutrition_days:
        raise GenerationError("Generated plan has no nutrition days")

    dropped = 0
    for day in fitness_days:
        for key in ("warmup_exercises", "exercises", "cooldown_exercises"):
            items = day.get(key) or []
            for item in items:
                exercise_id = item.get("exerciseId")
                if exercise_id and exercise_id not in library_ids:
                    item.pop("exerciseId")
                    dropped += 1
            day[key] = items

    if dropped:
        logger.warning(f"[Plan Service] Dropped {dropped} unknown exercise ids from generated plan")
    return data


def generate_plan_data(db: Session, profile: UserProfile, feedback: Optional[str] = None) -> Dict[str, Any]:
    logger.info(f"Generating fitness plan for user {profile.id}")
    prompt = build_plan_prompt(db, profile, feedback)
    data = llm_service.call_llm_json(SYSTEM_PROMPT, prompt, temperature=0.4)
    library_ids = {ex.id for ex in list_exercises(db)}
    return validate_plan_data(data, library_ids)


def create_plan_for_user(
    db: Session,
    profile: UserProfile,
    duration_days: int,
    feedback: Optional[str] = None,
) -> FitnessPlan:
    """
    Generate and store a new plan; it becomes the only active one.
    Nothing is written if generation fails.
    """
    plan_data = generate_plan_data(db, profile, feedback)
    plan = crud_plan.create_plan(db, profile.id, plan_data, duration_days, activate=True)
    logger.info(f"Stored plan {plan.id} ({duration_days} days) for user {profile.id}")
    return plan


def summarize_plan(plan: FitnessPlan) -> str:
    """Short text context of the plan for the coach."""
    data = plan.plan_data or {}
    fitness_days = _first_list(data, FITNESS_KEYS) or []
    names = [d.get("workout_name") or d.get("workout_name_pt") or "?" for d in fitness_days[:7]]
    return json.dumps({
        "summary": data.get("plan_summary") or data.get("plan_summary_pt"),
        "current_day": plan.current_day,
        "duration_days": plan.duration_days,
        "first_week": names,
    }, ensure_ascii=False)
