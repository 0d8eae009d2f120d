from typing import List, Optional
from sqlalchemy.orm import Session
from fitcoach.models.custom_meal import CustomMeal
from fitcoach.schemas.meal import CustomMealCreate

"""
Custom Meal CRUD
----------------
A custom meal overrides the plan meal at (plan_id, day_index, meal_slot).
At most one row per slot: saving into an occupied slot replaces it.
"""


def get_custom_meal(db: Session, custom_meal_id: int) -> Optional[CustomMeal]:
    return db.query(CustomMeal).filter(CustomMeal.id == custom_meal_id).first()


def get_custom_meal_for_slot(db: Session, plan_id: int, day_index: int, meal_slot: int) -> Optional[CustomMeal]:
    return db.query(CustomMeal).filter(
        CustomMeal.plan_id == plan_id,
        CustomMeal.day_index == day_index,
        CustomMeal.meal_slot == meal_slot
    ).first()


def list_custom_meals(db: Session, user_id: int, plan_id: int) -> List[CustomMeal]:
    return db.query(CustomMeal).filter(
        CustomMeal.user_id == user_id,
        CustomMeal.plan_id == plan_id
    ).order_by(CustomMeal.day_index.asc(), CustomMeal.meal_slot.asc()).all()


def save_custom_meal(db: Session, data: CustomMealCreate) -> CustomMeal:
    """
    Upsert by slot. The previous override (if any) is removed in the same
    transaction so the unique constraint never sees two rows.
    """
    try:
        existing = get_custom_meal_for_slot(db, data.plan_id, data.day_index, data.meal_slot)
        if existing:
            db.delete(existing)
            db.flush()

        custom_meal = CustomMeal(
            user_id=data.user_id,
            plan_id=data.plan_id,
            day_index=data.day_index,
            meal_slot=data.meal_slot,
            custom_meal=data.custom_meal,
            original_meal=data.original_meal,
            source=data.source,
        )
        db.add(custom_meal)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(custom_meal)
    return custom_meal


def delete_custom_meal(db: Session, custom_meal_id: int) -> bool:
    custom_meal = get_custom_meal(db, custom_meal_id)
    if not custom_meal:
        return False
    db.delete(custom_meal)
    db.commit()
    return True
