import logging
import math
from datetime import datetime, timedelta
from typing import List, Optional

import pytz
from sqlalchemy.orm import Session

from fitcoach.models.notification import Notification, NotificationSettings
from fitcoach.models.user_profile import UserProfile

logger = logging.getLogger(__name__)

GLASS_ML = 250

WATER_MESSAGES = {
    "en": "Time to drink water! Aim for {glasses} glasses ({target}ml) daily.",
    "pt": "Hora de beber água! Objetivo: {glasses} copos ({target}ml) por dia.",
}


def is_within_sleep_hours(hour: int, sleep_start: int, sleep_end: int) -> bool:
    """Sleep windows may wrap midnight (22 -> 7)."""
    if sleep_start > sleep_end:
        return hour >= sleep_start or hour < sleep_end
    return sleep_start <= hour < sleep_end


def user_local_now(profile: Optional[UserProfile], now_utc: Optional[datetime] = None) -> datetime:
    """
    Current wall clock time in the user's timezone. Falls back to UTC
    for unknown or missing timezones.
    """
    tz_name = getattr(profile, "timezone", None) or "UTC"
    try:
        user_tz = pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        user_tz = pytz.UTC

    now_utc = now_utc or datetime.now(pytz.UTC)
    if now_utc.tzinfo is None:
        now_utc = pytz.UTC.localize(now_utc)
    return now_utc.astimezone(user_tz)


def get_or_create_settings(db: Session, user_id: int) -> NotificationSettings:
    settings = db.query(NotificationSettings).filter(NotificationSettings.user_id == user_id).first()
    if not settings:
        settings = NotificationSettings(user_id=user_id)
        db.add(settings)
        db.commit()
        db.refresh(settings)
    return settings


def list_recent(db: Session, user_id: int, limit: int = 20) -> List[Notification]:
    return db.query(Notification).filter(
        Notification.user_id == user_id
    ).order_by(Notification.sent_at.desc(), Notification.id.desc()).limit(limit).all()


def get_unread(db: Session, user_id: int, limit: int = 20) -> List[Notification]:
    return [n for n in list_recent(db, user_id, limit) if not n.read]


def water_reminder_message(db: Session, user_id: int, language: str = "pt", now_utc: Optional[datetime] = None) -> Optional[str]:
    """
    Returns the reminder text if one is due, else None.
    Not due when disabled, inside the sleep window, or when the last
    water reminder is younger than the configured interval.
    """
    settings = get_or_create_settings(db, user_id)
    if not settings.water_reminders_enabled:
        return None

    profile = db.query(UserProfile).filter(UserProfile.id == user_id).first()
    local_now = user_local_now(profile, now_utc)
    if is_within_sleep_hours(local_now.hour, settings.sleep_start_hour, settings.sleep_end_hour):
        return None

    last_water = db.query(Notification).filter(
        Notification.user_id == user_id,
        Notification.type == "water"
    ).order_by(Notification.sent_at.desc()).first()

    naive_now = local_now.astimezone(pytz.UTC).replace(tzinfo=None)
    if last_water and naive_now - last_water.sent_at < timedelta(minutes=settings.water_reminder_interval_minutes):
        return None

    glasses = math.ceil(settings.water_target_ml / GLASS_ML)
    template = WATER_MESSAGES.get(language, WATER_MESSAGES["en"])
    return template.format(glasses=glasses, target=settings.water_target_ml)


def create_water_reminder(db: Session, user_id: int, language: str = "pt", now_utc: Optional[datetime] = None) -> Optional[Notification]:
    message = water_reminder_message(db, user_id, language, now_utc)
    if not message:
        return None

    # Stored naive, in UTC
    sent_at = user_local_now(None, now_utc).replace(tzinfo=None)
    notification = Notification(user_id=user_id, type="water", message=message, read=False, sent_at=sent_at)
    db.add(notification)
    db.commit()
    db.refresh(notification)
    logger.info(f"[Notifications] Water reminder created for user {user_id}")
    return notification


def mark_read(db: Session, notification_id: int) -> bool:
    notification = db.query(Notification).filter(Notification.id == notification_id).first()
    if not notification:
        return False
    notification.read = True
    db.commit()
    return True
