from pydantic import Field
from typing import Optional
from datetime import datetime
from fitcoach.schemas.base import CamelModel


class NotificationResponse(CamelModel):
    id: int
    type: str
    message: str
    read: bool
    sent_at: datetime


class NotificationSettingsResponse(CamelModel):
    user_id: int
    water_reminders_enabled: bool
    water_reminder_interval_minutes: int
    water_target_ml: int
    sleep_start_hour: int
    sleep_end_hour: int


class NotificationSettingsUpdate(CamelModel):
    water_reminders_enabled: Optional[bool] = None
    water_reminder_interval_minutes: Optional[int] = Field(default=None, ge=15, le=480)
    water_target_ml: Optional[int] = Field(default=None, ge=500, le=6000)
    sleep_start_hour: Optional[int] = Field(default=None, ge=0, le=23)
    sleep_end_hour: Optional[int] = Field(default=None, ge=0, le=23)
