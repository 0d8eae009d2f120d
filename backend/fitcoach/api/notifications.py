from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fitcoach.database import get_db
from fitcoach.crud import user_profile as crud_profile
from fitcoach.schemas.notification import (
    NotificationResponse, NotificationSettingsResponse, NotificationSettingsUpdate,
)
from fitcoach.services import notification_service

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


@router.get("/settings/{user_id}", response_model=NotificationSettingsResponse)
def get_settings(user_id: int, db: Session = Depends(get_db)):
    if not crud_profile.get_profile(db, user_id):
        raise HTTPException(status_code=404, detail="User profile not found")
    return notification_service.get_or_create_settings(db, user_id)


@router.patch("/settings/{user_id}", response_model=NotificationSettingsResponse)
def update_settings(user_id: int, request: NotificationSettingsUpdate, db: Session = Depends(get_db)):
    if not crud_profile.get_profile(db, user_id):
        raise HTTPException(status_code=404, detail="User profile not found")

    settings = notification_service.get_or_create_settings(db, user_id)
    for key, value in request.model_dump(exclude_unset=True).items():
        setattr(settings, key, value)
    db.commit()
    db.refresh(settings)
    return settings


@router.get("/{user_id}", response_model=List[NotificationResponse])
def list_notifications(user_id: int, db: Session = Depends(get_db)):
    return notification_service.list_recent(db, user_id)


@router.post("/poll/{user_id}", response_model=List[NotificationResponse])
def poll(user_id: int, db: Session = Depends(get_db)):
    """
    Called periodically by the dashboard: creates a water reminder if one
    is due, then returns the unread notifications.
    """
    profile = crud_profile.get_profile(db, user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="User profile not found")

    notification_service.create_water_reminder(db, user_id, profile.language or "pt")
    return notification_service.get_unread(db, user_id)


@router.patch("/{notification_id}/read")
def mark_read(notification_id: int, db: Session = Depends(get_db)):
    if not notification_service.mark_read(db, notification_id):
        raise HTTPException(status_code=404, detail="Notification not found")
    return {"message": "Notification marked as read"}
