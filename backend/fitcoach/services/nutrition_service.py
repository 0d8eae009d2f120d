import logging

logger = logging.getLogger(__name__)

"""
Nutrition Service
-----------------
Daily calorie, macro and hydration targets used to brief plan generation
and meal swaps. Pure business logic, no database access.
"""

ACTIVITY_MULTIPLIERS = {
    'sedentary': 1.2,   # Little or no exercise
    'light': 1.375,     # Light exercise 1-3 days/week
    'moderate': 1.55,   # Moderate exercise 3-5 days/week
    'very': 1.725,      # Hard exercise 6-7 days/week
}

# Percent of calories from protein / carbs / fat
MACRO_SPLITS = {
    'muscle': (40, 35, 25),
    'loss': (35, 35, 30),
}
DEFAULT_MACRO_SPLIT = (25, 50, 25)

# Weekly weight change in kg: (possible up to, challenging up to)
WEIGHT_CHANGE_LIMITS = {
    'loss': (0.75, 1.2),
}
DEFAULT_WEIGHT_CHANGE_LIMITS = (0.4, 0.6)  # gaining is slower


def calculate_bmr(weight: float, height: float, age: int, sex: str) -> float:
    """
    Mifflin-St Jeor Equation to calculate BMR.
    """
    s = 5 if (sex or '').lower() == 'male' else -161
    return (10 * weight) + (6.25 * height) - (5 * age) + s


def calculate_daily_targets(weight: float, height: float, age: int, sex: str, activity_level: str, goal: str) -> dict:
    """
    Calculates daily targets from physical attributes.

    Algorithm:
    1. BMR (Mifflin-St Jeor)
    2. TDEE (Activity Multiplier)
    3. Goal Adjustment (-400 kcal for loss, +300 kcal for muscle)
    4. Macro Split by goal, grams from kcal (4/4/9)
    5. Water ~35 ml per kg

    Returns:
        dict: { "bmr", "tdee", "calories", "protein_g", "carbs_g", "fat_g", "water_ml" }
    """
    bmr = calculate_bmr(weight, height, age, sex)
    tdee = round(bmr * ACTIVITY_MULTIPLIERS.get((activity_level or '').lower(), 1.2))

    goal = (goal or '').lower()
    calories = tdee
    if goal == 'loss':
        calories = tdee - 400
    elif goal == 'muscle':
        calories = tdee + 300

    protein_pct, carbs_pct, fat_pct = MACRO_SPLITS.get(goal, DEFAULT_MACRO_SPLIT)

    targets = {
        "bmr": round(bmr),
        "tdee": tdee,
        "calories": calories,
        "protein_g": round(calories * protein_pct / 100 / 4),
        "carbs_g": round(calories * carbs_pct / 100 / 4),
        "fat_g": round(calories * fat_pct / 100 / 9),
        "water_ml": round(weight * 35),
    }
    logger.info(f"[Nutrition Service] Targets for {weight}kg/{height}cm/{age}y ({goal}): {targets['calories']} kcal")
    return targets


def validate_weight_goal(current_weight: float, target_weight: float, weeks: int, goal: str) -> dict:
    """
    Rates a target weight by the weekly change it needs: "possible",
    "challenging" or "not_possible". Loss tolerates a faster pace than
    any other goal.
    """
    if weeks < 1:
        raise ValueError("Weeks must be at least 1")

    weekly_change = abs(target_weight - current_weight) / weeks
    possible, challenging = WEIGHT_CHANGE_LIMITS.get((goal or '').lower(), DEFAULT_WEIGHT_CHANGE_LIMITS)

    if weekly_change <= possible:
        status = "possible"
    elif weekly_change <= challenging:
        status = "challenging"
    else:
        status = "not_possible"

    logger.info(f"[Nutrition Service] {current_weight}kg -> {target_weight}kg in {weeks} weeks ({goal}): {status}")
    return {"status": status, "weekly_change": weekly_change}
