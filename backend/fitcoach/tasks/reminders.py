import logging
from datetime import datetime
from typing import Optional

import pytz
from sqlalchemy.orm import Session

from fitcoach.celery_app import celery_app
from fitcoach.database import SessionLocal
from fitcoach.models.notification import NotificationSettings
from fitcoach.models.user_profile import UserProfile
from fitcoach.services import notification_service

logger = logging.getLogger(__name__)


def sweep_water_reminders(db: Session, now_utc: Optional[datetime] = None) -> int:
    """
    Create a water reminder for every user who is due one. Users without a
    settings row get the defaults (reminders on). Returns how many were sent.
    """
    now_utc = now_utc or datetime.now(pytz.UTC)
    disabled = {
        s.user_id for s in db.query(NotificationSettings).filter(
            NotificationSettings.water_reminders_enabled.is_(False)
        ).all()
    }

    sent = 0
    for profile in db.query(UserProfile).all():
        if profile.id in disabled:
            continue
        try:
            if notification_service.create_water_reminder(db, profile.id, profile.language or "pt", now_utc):
                sent += 1
        except Exception as e:
            db.rollback()
            logger.error(f"Water reminder failed for user {profile.id}: {e}")
    return sent


@celery_app.task
def send_water_reminders():
    """Beat task: runs every 15 minutes."""
    db: Session = SessionLocal()
    try:
        sent = sweep_water_reminders(db)
        logger.info(f"Water reminder sweep ran. Sent {sent} reminders.")
    finally:
        db.close()
