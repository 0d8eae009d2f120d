from pydantic import Field, field_validator
from typing import List, Optional, Any, Dict, Literal
from datetime import datetime
from fitcoach.schemas.base import CamelModel


class MealTargets(CamelModel):
    target_calories: float
    target_protein: float
    target_carbs: float
    target_fat: float
    meal_time: str
    language: str = "pt"


class MealSwapRequest(MealTargets):
    original_meal: Dict[str, Any]


class MealSwapResponse(CamelModel):
    alternatives: List[Dict[str, Any]]


class MealFromIngredientsRequest(MealTargets):
    ingredients: List[str] = Field(min_length=1)

    @field_validator("ingredients")
    @classmethod
    def strip_blank(cls, value: List[str]) -> List[str]:
        cleaned = [i.strip() for i in value if i and i.strip()]
        if not cleaned:
            raise ValueError("At least one ingredient is required")
        return cleaned


class MealFromIngredientsResponse(CamelModel):
    meal: Dict[str, Any]


class CustomMealCreate(CamelModel):
    user_id: int
    plan_id: int
    day_index: int = Field(ge=0)
    meal_slot: int = Field(ge=0)
    custom_meal: Dict[str, Any]
    original_meal: Optional[Dict[str, Any]] = None
    source: Literal["swap", "ai_ingredients"] = "swap"


class CustomMealResponse(CamelModel):
    id: int
    user_id: int
    plan_id: int
    day_index: int
    meal_slot: int
    custom_meal: Dict[str, Any]
    original_meal: Optional[Dict[str, Any]] = None
    source: Optional[str] = None
    created_at: Optional[datetime] = None
