"""
Meal Override Layer
-------------------
A user may replace the plan meal at (day_index, meal_slot), either by
swapping it for an AI alternative or by generating one from ingredients.
Both end up as the same override record, and at most one override exists
per slot.

Apply is optimistic: the override is visible immediately and persisted
afterwards. Revert is pessimistic: the override is only dropped once the
backend confirms the delete.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from fitcoach.client.api_client import FitCoachClient
from fitcoach.client.errors import NotFound, ValidationFailure
from fitcoach.client.plan_model import Meal

logger = logging.getLogger(__name__)

SOURCES = ("swap", "ai_ingredients")


@dataclass
class MealOverride:
    plan_id: int
    day_index: int
    meal_slot: int
    custom_meal: Meal
    original_meal: Optional[Meal] = None
    source: str = "swap"
    id: Optional[int] = None

    @property
    def pending(self) -> bool:
        """Not yet confirmed by the backend."""
        return self.id is None

    @classmethod
    def from_api(cls, body: Dict[str, Any]) -> "MealOverride":
        original = body.get("originalMeal")
        return cls(
            id=body["id"],
            plan_id=body["planId"],
            day_index=body["dayIndex"],
            meal_slot=body["mealSlot"],
            custom_meal=Meal.from_raw(body.get("customMeal") or {}),
            original_meal=Meal.from_raw(original) if original else None,
            source=body.get("source") or "swap",
        )


@dataclass
class EffectiveMeal:
    meal: Optional[Meal]
    is_overridden: bool = False
    override_id: Optional[int] = None


@dataclass
class MealTargets:
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float

    @classmethod
    def of(cls, meal: Meal) -> "MealTargets":
        return cls(meal.calories, meal.protein_g, meal.carbs_g, meal.fat_g)

    def payload(self, meal_time: str, language: str) -> Dict[str, Any]:
        return {
            "targetCalories": self.calories,
            "targetProtein": self.protein_g,
            "targetCarbs": self.carbs_g,
            "targetFat": self.fat_g,
            "mealTime": meal_time,
            "language": language,
        }


class MealOverrideLayer:

    def __init__(self, client: FitCoachClient, user_id: int, plan_id: Optional[int] = None, language: str = "pt"):
        self.client = client
        self.user_id = user_id
        self.plan_id = plan_id
        self.language = language
        self.overrides: List[MealOverride] = []

    def find(self, day_index: int, slot: int) -> Optional[MealOverride]:
        for override in self.overrides:
            if override.day_index == day_index and override.meal_slot == slot:
                return override
        return None

    def get_effective_meal(self, day_index: int, slot: int, plan_meals: List[Meal]) -> EffectiveMeal:
        override = self.find(day_index, slot)
        if override:
            return EffectiveMeal(meal=override.custom_meal, is_overridden=True, override_id=override.id)
        meal = plan_meals[slot] if 0 <= slot < len(plan_meals) else None
        return EffectiveMeal(meal=meal)

    def apply_override(
        self,
        day_index: int,
        slot: int,
        new_meal: Meal,
        original_meal: Optional[Meal] = None,
        source: str = "swap",
    ) -> MealOverride:
        """Replace whatever override the slot had. Last write wins."""
        if self.plan_id is None:
            raise ValidationFailure("No plan loaded")
        if source not in SOURCES:
            raise ValidationFailure(f"Unknown override source: {source}")

        override = MealOverride(
            plan_id=self.plan_id,
            day_index=day_index,
            meal_slot=slot,
            custom_meal=new_meal,
            original_meal=original_meal,
            source=source,
        )
        self.overrides = [
            o for o in self.overrides if not (o.day_index == day_index and o.meal_slot == slot)
        ]
        self.overrides.append(override)
        return override

    async def persist(self, override: MealOverride) -> MealOverride:
        """
        Store an applied override. On failure the optimistic override
        stays visible and the error propagates to the caller.
        """
        body = await self.client.save_custom_meal({
            "userId": self.user_id,
            "planId": override.plan_id,
            "dayIndex": override.day_index,
            "mealSlot": override.meal_slot,
            "customMeal": override.custom_meal.model_dump(),
            "originalMeal": override.original_meal.model_dump() if override.original_meal else None,
            "source": override.source,
        })
        # A newer apply on the same slot may have replaced this one meanwhile
        if self.find(override.day_index, override.meal_slot) is override:
            override.id = body["id"]
        return override

    async def revert_override(self, override_id: int) -> None:
        override = next((o for o in self.overrides if o.id is not None and o.id == override_id), None)
        if override is None:
            raise NotFound(f"Override {override_id} not found")

        try:
            await self.client.delete_custom_meal(override_id)
        except NotFound:
            # Already gone on the server
            self.overrides.remove(override)
            raise
        self.overrides.remove(override)

    async def load(self, plan_id: int) -> None:
        """Switch to `plan_id`. Its overrides stay empty if the fetch fails."""
        self.plan_id = plan_id
        self.overrides = []
        body = await self.client.list_custom_meals(self.user_id, plan_id)
        self.overrides = [MealOverride.from_api(b) for b in body or []]

    async def generate_from_ingredients(self, ingredients: List[str], targets: MealTargets, meal_time: str) -> Meal:
        cleaned = [i.strip() for i in ingredients or [] if i and i.strip()]
        if not cleaned:
            raise ValidationFailure("At least one ingredient is required")

        body = await self.client.meal_from_ingredients(targets.payload(meal_time, self.language), cleaned)
        return Meal.from_raw(body["meal"])

    async def swap_alternatives(self, original_meal: Meal, targets: MealTargets, meal_time: str) -> List[Meal]:
        body = await self.client.meal_swap(targets.payload(meal_time, self.language), original_meal.model_dump())
        return [Meal.from_raw(a) for a in body.get("alternatives") or []]
