from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from fitcoach.database import get_db
from fitcoach.crud import fitness_plan as crud_plan
from fitcoach.crud import progress as crud_progress
from fitcoach.crud import user_profile as crud_profile
from fitcoach.schemas.plan import (
    ProgressRequest, ProgressResponse, ProfileResponse, ProfileUpdate, WeightGoalRequest, WeightGoalResponse,
)
from fitcoach.services import nutrition_service

router = APIRouter(prefix="/api", tags=["Progress"])


@router.post("/progress", response_model=ProgressResponse, status_code=status.HTTP_201_CREATED)
def record_progress(request: ProgressRequest, db: Session = Depends(get_db)):
    """
    Record a finished workout and move the plan to the next day,
    never past its last day.
    """
    plan = crud_plan.get_plan(db, request.plan_id)
    if not plan or plan.user_id != request.user_id:
        raise HTTPException(status_code=404, detail="Plan not found")
    if request.day > plan.duration_days:
        raise HTTPException(status_code=400, detail=f"Day must be between 1 and {plan.duration_days}")

    progress = crud_progress.create_progress(db, request.user_id, plan.id, request.day, request.difficulty)
    crud_plan.update_current_day(db, plan, min(request.day + 1, plan.duration_days))
    return progress


@router.get("/profile/{user_id}", response_model=ProfileResponse)
def read_profile(user_id: int, db: Session = Depends(get_db)):
    profile = crud_profile.get_profile(db, user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="User profile not found")
    return profile


@router.patch("/profile/{user_id}", response_model=ProfileResponse)
def update_profile(user_id: int, request: ProfileUpdate, db: Session = Depends(get_db)):
    profile = crud_profile.get_profile(db, user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="User profile not found")
    return crud_profile.update_profile(db, profile, request)


@router.post("/validate-weight-goal", response_model=WeightGoalResponse)
def validate_weight_goal(request: WeightGoalRequest):
    """Rate a target weight by the weekly change it needs."""
    result = nutrition_service.validate_weight_goal(
        request.current_weight, request.target_weight, request.weeks, request.goal
    )
    return WeightGoalResponse(**result)
