import logging
from typing import Dict, Any, List

from fitcoach.schemas.meal import MealTargets
from fitcoach.services import llm_service
from fitcoach.services.llm_service import GenerationError

logger = logging.getLogger(__name__)

"""
Meal Service
------------
AI helpers behind the two override sources:
- swap: alternatives for an existing plan meal with similar macros
- ai_ingredients: a new meal built from what the user has at home
Both return meals in the plan's meal shape; persisting the chosen one as a
custom meal is the caller's job.
"""

SYSTEM_PROMPT = "You are a sports nutritionist. Return strictly valid JSON."


def _language_name(code: str) -> str:
    return "European Portuguese" if code == "pt" else "English"


def _targets_block(targets: MealTargets) -> str:
    return (
        f"- Meal: {targets.meal_time}\n"
        f"    - Calories: {targets.target_calories} kcal\n"
        f"    - Protein: {targets.target_protein}g, Carbs: {targets.target_carbs}g, Fat: {targets.target_fat}g"
    )


def normalize_meal(raw: Dict[str, Any], meal_time: str) -> Dict[str, Any]:
    """
    Accepts English or Portuguese (_pt) keys and returns the plan meal shape.
    Missing numeric fields become 0.
    """
    meal = {
        "meal_time": raw.get("meal_time") or raw.get("meal_time_pt") or meal_time,
        "description": raw.get("description") or raw.get("description_pt") or "",
        "ingredients": raw.get("ingredients") or raw.get("main_ingredients") or raw.get("main_ingredients_pt") or "",
        "recipe": raw.get("recipe") or raw.get("recipe_pt"),
    }
    for key in ("calories", "protein_g", "carbs_g", "fat_g"):
        try:
            meal[key] = float(raw.get(key) or 0)
        except (TypeError, ValueError):
            meal[key] = 0.0
    return meal


def generate_swap_alternatives(targets: MealTargets, original_meal: Dict[str, Any], count: int = 3) -> List[Dict[str, Any]]:
    original = normalize_meal(original_meal, targets.meal_time)
    prompt = f"""
    # TASK
    Suggest {count} alternative meals to replace the one below, keeping similar macros.
    Write in {_language_name(targets.language)}.

    # ORIGINAL MEAL
    - {original['description']} ({original['calories']} kcal)
    - Ingredients: {original['ingredients']}

    # TARGETS
    {_targets_block(targets)}

    === OUTPUT JSON ===
    {{"alternatives": [{{"meal_time": "...", "description": "...", "ingredients": "...", "recipe": "...",
                        "calories": 0, "protein_g": 0, "carbs_g": 0, "fat_g": 0}}]}}
    """
    data = llm_service.call_llm_json(SYSTEM_PROMPT, prompt, temperature=0.7, max_tokens=4000)
    alternatives = (data or {}).get("alternatives") or []
    if not alternatives:
        raise GenerationError("No meal alternatives generated")

    logger.info(f"[Meal Service] Generated {len(alternatives)} alternatives for {targets.meal_time}")
    return [normalize_meal(a, targets.meal_time) for a in alternatives if isinstance(a, dict)]


def generate_meal_from_ingredients(targets: MealTargets, ingredients: List[str]) -> Dict[str, Any]:
    if not ingredients:
        raise ValueError("At least one ingredient is required")

    prompt = f"""
    # TASK
    Create one meal using mainly these ingredients: {", ".join(ingredients)}.
    Basic pantry items (oil, salt, spices) are allowed. Write in {_language_name(targets.language)}.

    # TARGETS
    {_targets_block(targets)}

    === OUTPUT JSON ===
    {{"meal": {{"meal_time": "{targets.meal_time}", "description": "...", "ingredients": "...", "recipe": "...",
               "calories": 0, "protein_g": 0, "carbs_g": 0, "fat_g": 0}}}}
    """
    data = llm_service.call_llm_json(SYSTEM_PROMPT, prompt, temperature=0.6, max_tokens=3000)
    meal = (data or {}).get("meal")
    if not isinstance(meal, dict) or not (meal.get("description") or meal.get("description_pt")):
        raise GenerationError("No meal generated from ingredients")

    return normalize_meal(meal, targets.meal_time)
