from datetime import datetime, timedelta
from typing import List, Optional, Dict, Any
from sqlalchemy.orm import Session
from fitcoach.models.fitness_plan import FitnessPlan

"""
Fitness Plan CRUD
-----------------
Pure Database Access Object for Fitness Plans.
At most one plan per user is active: every write that touches the flag
does so inside a single commit, so readers never observe two active plans.
Generation lives in fitcoach.services.plan_service.
"""


def get_plan(db: Session, plan_id: int) -> Optional[FitnessPlan]:
    return db.query(FitnessPlan).filter(FitnessPlan.id == plan_id).first()


def get_active_plan(db: Session, user_id: int) -> Optional[FitnessPlan]:
    return db.query(FitnessPlan).filter(
        FitnessPlan.user_id == user_id,
        FitnessPlan.is_active.is_(True)
    ).first()


def get_latest_plan(db: Session, user_id: int) -> Optional[FitnessPlan]:
    return db.query(FitnessPlan).filter(
        FitnessPlan.user_id == user_id
    ).order_by(FitnessPlan.created_at.desc(), FitnessPlan.id.desc()).first()


def get_current_plan(db: Session, user_id: int) -> Optional[FitnessPlan]:
    """
    The plan driving the dashboard: the active one, else the most recent.
    """
    return get_active_plan(db, user_id) or get_latest_plan(db, user_id)


def list_plans(db: Session, user_id: int) -> List[FitnessPlan]:
    """All plans of a user, newest first."""
    return db.query(FitnessPlan).filter(
        FitnessPlan.user_id == user_id
    ).order_by(FitnessPlan.created_at.desc(), FitnessPlan.id.desc()).all()


def create_plan(
    db: Session,
    user_id: int,
    plan_data: Dict[str, Any],
    duration_days: int,
    activate: bool = True,
) -> FitnessPlan:
    """
    Store a generated plan. When activating, every other plan of the user
    is switched off in the same transaction.
    """
    start_date = datetime.utcnow()
    plan = FitnessPlan(
        user_id=user_id,
        plan_data=plan_data,
        current_day=1,
        duration_days=duration_days,
        is_active=activate,
        start_date=start_date,
        end_date=start_date + timedelta(days=duration_days),
    )
    try:
        if activate:
            db.query(FitnessPlan).filter(
                FitnessPlan.user_id == user_id
            ).update({FitnessPlan.is_active: False}, synchronize_session=False)
        db.add(plan)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(plan)
    return plan


def set_active_plan(db: Session, user_id: int, plan_id: int) -> Optional[FitnessPlan]:
    """
    Activate plan_id for user_id and deactivate the user's other plans.
    Returns None if the plan does not exist or belongs to someone else.
    """
    plan = get_plan(db, plan_id)
    if not plan or plan.user_id != user_id:
        return None

    try:
        db.query(FitnessPlan).filter(
            FitnessPlan.user_id == user_id,
            FitnessPlan.id != plan_id
        ).update({FitnessPlan.is_active: False}, synchronize_session=False)
        plan.is_active = True
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.expire_all()
    return get_plan(db, plan_id)


def deactivate_plan(db: Session, plan_id: int) -> None:
    plan = get_plan(db, plan_id)
    if plan and plan.is_active:
        plan.is_active = False
        db.commit()


def delete_plan(db: Session, plan_id: int) -> bool:
    """
    Delete a plan with its progress and custom meals (ORM cascade).
    Deleting the active plan leaves the user with no active plan.
    """
    plan = get_plan(db, plan_id)
    if not plan:
        return False
    try:
        db.delete(plan)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return True


def update_current_day(db: Session, plan: FitnessPlan, day: int) -> FitnessPlan:
    plan.current_day = day
    db.commit()
    db.refresh(plan)
    return plan
