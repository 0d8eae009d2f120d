import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from fitcoach.database import get_db
from fitcoach.crud import user_profile as crud_profile
from fitcoach.schemas.coach import (
    CoachMessageRequest, CoachMessageResponse, CoachReply, RegeneratePlanRequest, RegeneratePlanResponse,
)
from fitcoach.schemas.plan import PlanSummary
from fitcoach.services.coach_service import CoachService
from fitcoach.services.llm_service import GenerationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/coach", tags=["Coach"])


@router.post("/message", response_model=CoachReply)
def send_message(request: CoachMessageRequest, db: Session = Depends(get_db)):
    """
    Chat with the virtual coach. The reply is grounded on the user's
    active plan and recent progress.
    """
    if not request.message.strip():
        raise HTTPException(status_code=400, detail="Message cannot be empty")
    if not crud_profile.get_profile(db, request.user_id):
        raise HTTPException(status_code=404, detail="User profile not found")

    coach = CoachService(db)
    answer = coach.reply(request.user_id, request.message.strip(), request.language)
    history = [CoachMessageResponse.model_validate(m) for m in coach.history(request.user_id)]
    return CoachReply(reply=answer, history=history)


@router.delete("/messages/{user_id}")
def clear_messages(user_id: int, db: Session = Depends(get_db)):
    deleted = CoachService(db).clear_history(user_id)
    return {"message": "Chat history cleared", "deleted": deleted}


@router.post("/regenerate-plan", response_model=RegeneratePlanResponse, status_code=status.HTTP_201_CREATED)
def regenerate_plan(request: RegeneratePlanRequest, db: Session = Depends(get_db)):
    profile = crud_profile.get_profile(db, request.user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="User profile not found")

    try:
        plan = CoachService(db).regenerate_plan(profile, request.feedback, request.duration_days)
    except GenerationError as e:
        logger.error(f"Coach plan regeneration failed for user {profile.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate fitness plan")

    return RegeneratePlanResponse(plan=PlanSummary.model_validate(plan), message="New plan created")
