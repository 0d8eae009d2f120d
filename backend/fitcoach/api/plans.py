import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from fitcoach.database import get_db
from fitcoach.crud import fitness_plan as crud_plan
from fitcoach.crud import progress as crud_progress
from fitcoach.crud import user_profile as crud_profile
from fitcoach.models.fitness_plan import FitnessPlan
from fitcoach.schemas.plan import (
    OnboardingRequest, OnboardingResponse, PlanResponse, PlanSummary,
    ActivatePlanRequest, RenewPlanRequest, DayUpdateRequest, DayUpdateResponse,
)
from fitcoach.services import plan_service
from fitcoach.services.llm_service import GenerationError
from fitcoach.config import DEFAULT_PLAN_DURATION_DAYS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Plans"])


def build_plan_response(db: Session, plan: FitnessPlan) -> PlanResponse:
    return PlanResponse(
        plan_id=plan.id,
        plan=plan.plan_data or {},
        current_day=plan.current_day,
        duration_days=plan.duration_days,
        is_active=plan.is_active,
        start_date=plan.start_date,
        end_date=plan.end_date,
        is_expired=bool(plan.end_date and datetime.utcnow() > plan.end_date),
        progress=crud_progress.list_progress(db, plan.user_id, plan.id),
    )


@router.post("/onboarding", response_model=OnboardingResponse, status_code=status.HTTP_201_CREATED)
def onboarding(request: OnboardingRequest, db: Session = Depends(get_db)):
    """
    Create the profile and its first plan. The profile is kept even if
    generation fails, so the client can retry with /plan/renew.
    """
    if bool(request.phone_number) != bool(request.pin):
        raise HTTPException(status_code=400, detail="Phone number and PIN must be given together")
    if request.phone_number and crud_profile.get_by_phone(db, request.phone_number):
        raise HTTPException(status_code=400, detail="Phone number already registered")

    profile = crud_profile.create_profile(db, request)
    try:
        plan = plan_service.create_plan_for_user(db, profile, DEFAULT_PLAN_DURATION_DAYS)
    except GenerationError as e:
        logger.error(f"Plan generation failed during onboarding of user {profile.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate fitness plan")

    return OnboardingResponse(user_id=profile.id, plan_id=plan.id, plan=plan.plan_data)


@router.get("/plan/{user_id}", response_model=PlanResponse)
def get_plan(user_id: int, db: Session = Depends(get_db)):
    plan = crud_plan.get_current_plan(db, user_id)
    if not plan:
        raise HTTPException(status_code=404, detail="Plan not found")
    return build_plan_response(db, plan)


@router.get("/plans/{user_id}", response_model=List[PlanSummary])
def list_plans(user_id: int, db: Session = Depends(get_db)):
    return crud_plan.list_plans(db, user_id)


@router.patch("/plan/{plan_id}/activate", response_model=PlanSummary)
def activate_plan(plan_id: int, request: ActivatePlanRequest, db: Session = Depends(get_db)):
    plan = crud_plan.set_active_plan(db, request.user_id, plan_id)
    if not plan:
        raise HTTPException(status_code=404, detail="Plan not found")
    return plan


@router.delete("/plan/{plan_id}")
def delete_plan(plan_id: int, db: Session = Depends(get_db)):
    if not crud_plan.delete_plan(db, plan_id):
        raise HTTPException(status_code=404, detail="Plan not found")
    return {"message": "Plan deleted"}


@router.post("/plan/renew", response_model=PlanResponse, status_code=status.HTTP_201_CREATED)
def renew_plan(request: RenewPlanRequest, db: Session = Depends(get_db)):
    """
    Generate a fresh plan of the requested length. The current plan is
    only switched off once the new one is stored.
    """
    profile = crud_profile.get_profile(db, request.user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="User profile not found")

    try:
        plan = plan_service.create_plan_for_user(db, profile, request.duration_days)
    except GenerationError as e:
        logger.error(f"Plan renewal failed for user {profile.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate fitness plan")
    return build_plan_response(db, plan)


@router.patch("/plan/{plan_id}/day", response_model=DayUpdateResponse)
def update_day(plan_id: int, request: DayUpdateRequest, db: Session = Depends(get_db)):
    plan = crud_plan.get_plan(db, plan_id)
    if not plan:
        raise HTTPException(status_code=404, detail="Plan not found")
    if request.day > plan.duration_days:
        raise HTTPException(status_code=400, detail=f"Day must be between 1 and {plan.duration_days}")

    plan = crud_plan.update_current_day(db, plan, request.day)
    return DayUpdateResponse(plan_id=plan.id, current_day=plan.current_day)
