from datetime import datetime
from typing import List
from sqlalchemy import func
from sqlalchemy.orm import Session
from fitcoach.models.exercise_progress import ExerciseProgress


def create_progress(db: Session, user_id: int, plan_id: int, day: int, difficulty: str) -> ExerciseProgress:
    """
    Append a completion record. Duplicates for the same day are kept;
    readers count distinct days.
    """
    progress = ExerciseProgress(
        user_id=user_id,
        plan_id=plan_id,
        day=day,
        completed=1,
        difficulty=difficulty,
        completed_at=datetime.utcnow(),
    )
    db.add(progress)
    db.commit()
    db.refresh(progress)
    return progress


def list_progress(db: Session, user_id: int, plan_id: int) -> List[ExerciseProgress]:
    return db.query(ExerciseProgress).filter(
        ExerciseProgress.user_id == user_id,
        ExerciseProgress.plan_id == plan_id
    ).order_by(ExerciseProgress.day.asc(), ExerciseProgress.id.asc()).all()


def count_completed_days(db: Session, user_id: int, plan_id: int) -> int:
    return db.query(func.count(func.distinct(ExerciseProgress.day))).filter(
        ExerciseProgress.user_id == user_id,
        ExerciseProgress.plan_id == plan_id,
        ExerciseProgress.completed == 1
    ).scalar() or 0
