from pydantic import Field
from typing import List, Optional
from datetime import datetime
from fitcoach.schemas.base import CamelModel
from fitcoach.schemas.plan import PlanSummary
from fitcoach.config import MIN_PLAN_DURATION_DAYS, MAX_PLAN_DURATION_DAYS


class CoachMessageRequest(CamelModel):
    user_id: int
    message: str
    language: str = "pt"


class CoachMessageResponse(CamelModel):
    role: str
    content: str
    created_at: Optional[datetime] = None


class CoachReply(CamelModel):
    reply: str
    history: List[CoachMessageResponse] = []


class RegeneratePlanRequest(CamelModel):
    user_id: int
    feedback: Optional[str] = None
    duration_days: Optional[int] = Field(default=None, ge=MIN_PLAN_DURATION_DAYS, le=MAX_PLAN_DURATION_DAYS)


class RegeneratePlanResponse(CamelModel):
    plan: PlanSummary
    message: str
