import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from fitcoach.database import get_db
from fitcoach.crud import custom_meal as crud_custom_meal
from fitcoach.crud import fitness_plan as crud_plan
from fitcoach.schemas.meal import (
    MealSwapRequest, MealSwapResponse, MealFromIngredientsRequest, MealFromIngredientsResponse,
    CustomMealCreate, CustomMealResponse,
)
from fitcoach.services import meal_service
from fitcoach.services.llm_service import GenerationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/nutrition", tags=["Nutrition"])


@router.post("/meal-swap", response_model=MealSwapResponse)
def meal_swap(request: MealSwapRequest):
    try:
        alternatives = meal_service.generate_swap_alternatives(request, request.original_meal)
    except GenerationError as e:
        logger.error(f"Meal swap failed for {request.meal_time}: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate meal alternatives")
    return MealSwapResponse(alternatives=alternatives)


@router.post("/meal-from-ingredients", response_model=MealFromIngredientsResponse)
def meal_from_ingredients(request: MealFromIngredientsRequest):
    try:
        meal = meal_service.generate_meal_from_ingredients(request, request.ingredients)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    except GenerationError as e:
        logger.error(f"Meal from ingredients failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate meal")
    return MealFromIngredientsResponse(meal=meal)


@router.post("/custom-meal", response_model=CustomMealResponse, status_code=status.HTTP_201_CREATED)
def save_custom_meal(request: CustomMealCreate, db: Session = Depends(get_db)):
    """
    Store the override for a plan meal slot, replacing any previous one.
    """
    plan = crud_plan.get_plan(db, request.plan_id)
    if not plan or plan.user_id != request.user_id:
        raise HTTPException(status_code=404, detail="Plan not found")
    return crud_custom_meal.save_custom_meal(db, request)


@router.get("/custom-meals/{user_id}/{plan_id}", response_model=List[CustomMealResponse])
def list_custom_meals(user_id: int, plan_id: int, db: Session = Depends(get_db)):
    return crud_custom_meal.list_custom_meals(db, user_id, plan_id)


@router.delete("/custom-meal/{custom_meal_id}")
def delete_custom_meal(custom_meal_id: int, db: Session = Depends(get_db)):
    if not crud_custom_meal.delete_custom_meal(db, custom_meal_id):
        raise HTTPException(status_code=404, detail="Custom meal not found")
    return {"message": "Custom meal deleted"}
