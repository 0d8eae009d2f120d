from pydantic import Field
from typing import List, Dict, Optional, Any, Literal
from datetime import datetime
from fitcoach.schemas.base import CamelModel
from fitcoach.config import MIN_PLAN_DURATION_DAYS, MAX_PLAN_DURATION_DAYS, DEFAULT_PLAN_DURATION_DAYS

Difficulty = Literal["easy", "just right", "hard"]


class OnboardingRequest(CamelModel):
    sex: str
    age: int = Field(ge=14, le=100)
    weight: int = Field(ge=30, le=300)
    height: int = Field(ge=100, le=250)
    goal: str
    activity_level: str
    equipment: Optional[List[str]] = None
    impediments: Optional[str] = None
    time_per_day: int = 45
    difficulty: str = "medium"
    language: str = "pt"
    timezone: str = "UTC"
    phone_number: Optional[str] = Field(default=None, min_length=6, max_length=30)
    pin: Optional[str] = Field(default=None, pattern=r"^\d{4,8}$")


class ProfileUpdate(CamelModel):
    weight: Optional[int] = Field(default=None, ge=30, le=300)
    height: Optional[int] = Field(default=None, ge=100, le=250)
    age: Optional[int] = Field(default=None, ge=14, le=100)
    goal: Optional[str] = None
    activity_level: Optional[str] = None
    equipment: Optional[List[str]] = None
    impediments: Optional[str] = None
    time_per_day: Optional[int] = None
    difficulty: Optional[str] = None
    language: Optional[str] = None
    timezone: Optional[str] = None


class ProfileResponse(CamelModel):
    id: int
    sex: str
    age: int
    weight: int
    height: int
    goal: str
    activity_level: str
    equipment: Optional[List[str]] = None
    impediments: Optional[str] = None
    time_per_day: Optional[int] = None
    difficulty: Optional[str] = None
    language: Optional[str] = None
    timezone: Optional[str] = None
    phone_number: Optional[str] = None
    created_at: Optional[datetime] = None


class WeightGoalRequest(CamelModel):
    current_weight: float = Field(ge=30, le=300)
    target_weight: float = Field(ge=30, le=300)
    weeks: int = Field(ge=1, le=104)
    sex: str
    age: int = Field(ge=18, le=100)
    height: float = Field(ge=100, le=250)
    goal: str
    activity_level: str
    language: str = "pt"


class WeightGoalResponse(CamelModel):
    status: Literal["possible", "challenging", "not_possible"]
    weekly_change: float


class ProgressRequest(CamelModel):
    user_id: int
    plan_id: int
    day: int = Field(ge=1)
    difficulty: Difficulty


class ProgressResponse(CamelModel):
    id: int
    user_id: int
    plan_id: int
    day: int
    difficulty: Optional[str] = None
    completed_at: Optional[datetime] = None


class PlanSummary(CamelModel):
    id: int
    user_id: int
    plan_data: Dict[str, Any]
    current_day: int
    duration_days: int
    is_active: bool
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    created_at: Optional[datetime] = None


class PlanResponse(CamelModel):
    plan_id: int
    plan: Dict[str, Any]
    current_day: int
    duration_days: int
    is_active: bool
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    is_expired: bool = False
    progress: List[ProgressResponse] = []


class ActivatePlanRequest(CamelModel):
    user_id: int


class RenewPlanRequest(CamelModel):
    user_id: int
    duration_days: int = Field(
        default=DEFAULT_PLAN_DURATION_DAYS, ge=MIN_PLAN_DURATION_DAYS, le=MAX_PLAN_DURATION_DAYS
    )


class DayUpdateRequest(CamelModel):
    day: int = Field(ge=1, le=MAX_PLAN_DURATION_DAYS)


class DayUpdateResponse(CamelModel):
    plan_id: int
    current_day: int


class OnboardingResponse(CamelModel):
    user_id: int
    plan_id: int
    plan: Dict[str, Any]
