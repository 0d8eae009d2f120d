"""
Plan Data Model
---------------
Typed view over the generated plan JSON stored by the backend.

The generator writes English or Portuguese (``_pt``) keys and either a
15- or 7-day fitness cycle; everything is normalised here so the rest of
the client only sees DayPlan / NutritionDay lists indexed by plan day.
"""
import re
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

FITNESS_KEYS = ("fitness_plan_15_days", "fitness_plan_7_days")
NUTRITION_KEYS = ("nutrition_plan_7_days", "nutrition_plan_3_days")

_DURATION_RE = re.compile(
    r"(\d+(?:[.,]\d+)?)\s*(min|minutes?|minutos?|sec|secs|seconds?|seg|segundos?|s)\b", re.IGNORECASE
)
_NUMBER_RE = re.compile(r"\d+")
_REPS_RE = re.compile(r"\brep", re.IGNORECASE)


def parse_duration_seconds(text: Optional[str]) -> Optional[int]:
    """
    "45 sec" -> 45, "1 min" -> 60, "30 segundos" -> 30.
    Returns None when the text is not a duration (e.g. "12 reps"). Any
    mention of reps wins over a duration, so "12 reps (rest 30 sec)" is
    rep-based.
    """
    if not text or _REPS_RE.search(text):
        return None
    match = _DURATION_RE.search(text)
    if not match:
        return None
    value = float(match.group(1).replace(",", "."))
    if match.group(2).lower().startswith("min"):
        value *= 60
    return int(round(value))


def parse_reps(text: Optional[str]) -> Optional[int]:
    if not text or parse_duration_seconds(text) is not None:
        return None
    match = _NUMBER_RE.search(text)
    return int(match.group()) if match else None


def fitness_day_index(day: int, plan_length: int) -> int:
    """Plan day (1-based) to fitness-day index; the generated cycle repeats."""
    if plan_length < 1:
        raise ValueError("Plan has no fitness days")
    if day < 1:
        raise ValueError(f"Day must be >= 1, got {day}")
    return (day - 1) % plan_length


def normalize_key(name: Optional[str]) -> str:
    return re.sub(r"\s+", " ", (name or "").lower()).strip()


def _first_list(data: Dict[str, Any], keys) -> List[Any]:
    for key in keys:
        value = data.get(key)
        if isinstance(value, list) and value:
            return value
    return []


def _to_float(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def _to_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class ExerciseRef(BaseModel):
    name: str = ""
    localized_name: Optional[str] = None
    sets: int = 1
    reps_or_time: Optional[str] = None
    equipment_used: Optional[str] = None
    exercise_id: Optional[str] = None
    duration_seconds: Optional[int] = None

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "ExerciseRef":
        duration = raw.get("duration_seconds")
        reps_or_time = raw.get("reps_or_time") or raw.get("reps_or_time_pt")
        if duration and not reps_or_time:
            reps_or_time = f"{_to_int(duration)} sec"
        return cls(
            name=raw.get("name") or raw.get("name_pt") or "",
            localized_name=raw.get("name_pt"),
            sets=_to_int(raw.get("sets"), 1) or 1,
            reps_or_time=reps_or_time,
            equipment_used=raw.get("equipment_used") or raw.get("equipment_used_pt"),
            exercise_id=raw.get("exerciseId") or raw.get("exercise_id"),
            duration_seconds=_to_int(duration) if duration else None,
        )

    @property
    def timed_seconds(self) -> Optional[int]:
        """Seconds for a timed item, None for a rep-based one."""
        return self.duration_seconds or parse_duration_seconds(self.reps_or_time)

    @property
    def name_key(self) -> str:
        return normalize_key(self.name)

    def is_empty(self) -> bool:
        return not (self.name.strip() or self.exercise_id)


class DayPlan(BaseModel):
    day_number: int
    workout_name: str = ""
    focus: Optional[str] = None
    is_rest_day: bool = False
    duration_minutes: Optional[int] = None
    estimated_calories_burnt: float = 0
    warmup_exercises: List[ExerciseRef] = Field(default_factory=list)
    exercises: List[ExerciseRef] = Field(default_factory=list)
    cooldown_exercises: List[ExerciseRef] = Field(default_factory=list)

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], position: int) -> "DayPlan":
        def refs(key: str) -> List[ExerciseRef]:
            return [ExerciseRef.from_raw(r) for r in raw.get(key) or [] if isinstance(r, dict)]

        return cls(
            day_number=_to_int(raw.get("day"), position + 1),
            workout_name=raw.get("workout_name") or raw.get("workout_name_pt") or "",
            focus=raw.get("focus") or raw.get("focus_pt"),
            is_rest_day=bool(raw.get("is_rest_day")),
            duration_minutes=_to_int(raw.get("duration_minutes")) or None,
            estimated_calories_burnt=_to_float(raw.get("estimated_calories_burnt")),
            warmup_exercises=refs("warmup_exercises"),
            exercises=refs("exercises"),
            cooldown_exercises=refs("cooldown_exercises"),
        )

    def all_refs(self) -> List[ExerciseRef]:
        """Warmup, main and cooldown in order, without empty entries."""
        refs = self.warmup_exercises + self.exercises + self.cooldown_exercises
        return [r for r in refs if not r.is_empty()]


class Meal(BaseModel):
    meal_time: str = ""
    description: str = ""
    ingredients: str = ""
    calories: float = 0
    protein_g: float = 0
    carbs_g: float = 0
    fat_g: float = 0
    recipe: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "Meal":
        ingredients = raw.get("ingredients") or raw.get("main_ingredients") or raw.get("main_ingredients_pt") or ""
        if isinstance(ingredients, list):
            ingredients = ", ".join(str(i) for i in ingredients)
        return cls(
            meal_time=raw.get("meal_time") or raw.get("meal_time_pt") or "",
            description=raw.get("description") or raw.get("description_pt") or "",
            ingredients=ingredients,
            calories=_to_float(raw.get("calories")),
            protein_g=_to_float(raw.get("protein_g")),
            carbs_g=_to_float(raw.get("carbs_g")),
            fat_g=_to_float(raw.get("fat_g")),
            recipe=raw.get("recipe") or raw.get("recipe_pt"),
        )


class NutritionDay(BaseModel):
    day_number: int
    total_daily_calories: float = 0
    total_daily_macros: Optional[str] = None
    meals: List[Meal] = Field(default_factory=list)

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], position: int) -> "NutritionDay":
        return cls(
            day_number=_to_int(raw.get("day"), position + 1),
            total_daily_calories=_to_float(raw.get("total_daily_calories")),
            total_daily_macros=raw.get("total_daily_macros") or raw.get("total_daily_macros_pt"),
            meals=[Meal.from_raw(m) for m in raw.get("meals") or [] if isinstance(m, dict)],
        )


class ProgressRecord(BaseModel):
    user_id: int
    plan_id: int
    day: int
    difficulty: Optional[str] = None
    recorded_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, body: Dict[str, Any]) -> "ProgressRecord":
        return cls(
            user_id=body["userId"],
            plan_id=body["planId"],
            day=body["day"],
            difficulty=body.get("difficulty"),
            recorded_at=body.get("completedAt"),
        )


class Plan(BaseModel):
    id: int
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None
    current_day: int = 1
    duration_days: int = 30
    is_active: bool = False
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    is_expired: bool = False
    summary: Optional[str] = None
    fitness_days: List[DayPlan] = Field(default_factory=list)
    nutrition_days: List[NutritionDay] = Field(default_factory=list)

    @classmethod
    def from_api(cls, body: Dict[str, Any]) -> "Plan":
        """
        Accepts both backend shapes: the dashboard response
        ({planId, plan, ...}) and a plan list entry ({id, planData, ...}).
        """
        data = body.get("plan") if "planId" in body else body.get("planData")
        data = data or {}
        return cls(
            id=body.get("planId", body.get("id")),
            user_id=body.get("userId"),
            created_at=body.get("createdAt"),
            current_day=body.get("currentDay") or 1,
            duration_days=body.get("durationDays") or 30,
            is_active=bool(body.get("isActive")),
            start_date=body.get("startDate"),
            end_date=body.get("endDate"),
            is_expired=bool(body.get("isExpired")),
            summary=data.get("plan_summary") or data.get("plan_summary_pt"),
            fitness_days=[DayPlan.from_raw(d, i) for i, d in enumerate(_first_list(data, FITNESS_KEYS))],
            nutrition_days=[NutritionDay.from_raw(d, i) for i, d in enumerate(_first_list(data, NUTRITION_KEYS))],
        )

    def clamp_day(self, day: int) -> int:
        return max(1, min(day, self.duration_days))

    def day_plan(self, day: int) -> Optional[DayPlan]:
        if not self.fitness_days:
            return None
        return self.fitness_days[fitness_day_index(day, len(self.fitness_days))]

    def nutrition_day_index(self, day: int) -> Optional[int]:
        """
        Index into nutrition_days for a plan day: an entry explicitly
        numbered `day` wins, otherwise the nutrition cycle repeats.
        """
        if not self.nutrition_days:
            return None
        for index, nutrition_day in enumerate(self.nutrition_days):
            if nutrition_day.day_number == day:
                return index
        return fitness_day_index(day, len(self.nutrition_days))

    def nutrition_day(self, day: int) -> Optional[NutritionDay]:
        index = self.nutrition_day_index(day)
        return None if index is None else self.nutrition_days[index]

    def day_refs(self, day: int) -> List[ExerciseRef]:
        day_plan = self.day_plan(day)
        return day_plan.all_refs() if day_plan else []
