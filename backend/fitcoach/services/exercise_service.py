import logging
from typing import Dict, Any, List, Optional, Tuple
from sqlalchemy.orm import Session

from fitcoach.crud import exercise as crud_exercise
from fitcoach.data.exercise_library import EXERCISE_LIBRARY
from fitcoach.models.exercise import Exercise
from fitcoach.services import llm_service
from fitcoach.services.llm_service import GenerationError

logger = logging.getLogger(__name__)

# Fields a library card needs to be considered complete
DETAIL_FIELDS = ("category", "primary_muscles", "equipment", "difficulty", "instructions", "instructions_pt")

SYSTEM_PROMPT = "You are an exercise physiologist writing an exercise library. Return strictly valid JSON."


def missing_fields(exercise: Exercise) -> List[str]:
    return [f for f in DETAIL_FIELDS if not getattr(exercise, f, None)]


def _clean_list(value: Any) -> Optional[List[str]]:
    if isinstance(value, str):
        value = [v.strip() for v in value.split(",")]
    if isinstance(value, list):
        cleaned = [str(v).strip().lower() for v in value if str(v).strip()]
        return cleaned or None
    return None


def enrich_exercise(
    db: Session,
    name: str,
    exercise_id: Optional[str] = None,
    equipment: Optional[str] = None,
) -> Tuple[Exercise, List[str]]:
    """
    Produce a library record for an exercise the library could not match.
    Returns (exercise, missing_fields). A non-empty missing list means the
    record is usable but incomplete. Raises GenerationError when the model
    returns nothing usable.
    """
    if exercise_id:
        existing = crud_exercise.get_exercise(db, exercise_id)
        if existing and not missing_fields(existing):
            return existing, []

    prompt = f"""
    # TASK
    Describe the exercise "{name}"{f' performed with {equipment}' if equipment else ''}.

    === OUTPUT JSON ===
    {{
      "name": "English name",
      "name_pt": "Nome em português",
      "category": "Strength | Cardio | Mobility | Stretching",
      "primary_muscles": ["..."],
      "secondary_muscles": ["..."],
      "equipment": "bodyweight | dumbbell | kettlebell | bench | machine | ...",
      "difficulty": "beginner | intermediate | advanced",
      "instructions": "2-3 sentences",
      "instructions_pt": "2-3 frases"
    }}
    """
    data = llm_service.call_llm_json(SYSTEM_PROMPT, prompt, temperature=0.2, max_tokens=1500)
    if not data or not (data.get("name") or name):
        raise GenerationError(f"Could not enrich exercise '{name}'")

    fields: Dict[str, Any] = {
        "id": exercise_id or crud_exercise.slugify(data.get("name") or name),
        "name": data.get("name") or name,
        "name_pt": data.get("name_pt"),
        "category": data.get("category"),
        "primary_muscles": _clean_list(data.get("primary_muscles")),
        "secondary_muscles": _clean_list(data.get("secondary_muscles")),
        "equipment": data.get("equipment") or equipment,
        "difficulty": (data.get("difficulty") or "").lower() or None,
        "instructions": data.get("instructions"),
        "instructions_pt": data.get("instructions_pt"),
        "is_enriched": True,
    }
    exercise = crud_exercise.upsert_exercise(db, fields)

    missing = missing_fields(exercise)
    if missing:
        logger.warning(f"[Exercise Service] Enriched '{name}' is missing: {', '.join(missing)}")
    else:
        logger.info(f"[Exercise Service] Enriched '{name}' as {exercise.id}")
    return exercise, missing


def seed_library(db: Session) -> int:
    """Load the bundled library; safe to run repeatedly."""
    count = crud_exercise.seed_exercises(db, EXERCISE_LIBRARY)
    logger.info(f"[Exercise Service] Seeded {count} exercises")
    return count
