from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from fitcoach.database import Base


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user_profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(String(50), default="info")  # 'water', 'meal', 'workout', 'info'
    message = Column(String(255), nullable=False)
    read = Column(Boolean, default=False)
    sent_at = Column(DateTime, default=datetime.utcnow)


class NotificationSettings(Base):
    __tablename__ = "notification_settings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user_profiles.id", ondelete="CASCADE"), unique=True, nullable=False)

    water_reminders_enabled = Column(Boolean, default=True)
    water_reminder_interval_minutes = Column(Integer, default=90)
    water_target_ml = Column(Integer, default=2000)
    sleep_start_hour = Column(Integer, default=22)
    sleep_end_hour = Column(Integer, default=7)

    user = relationship("UserProfile", back_populates="notification_settings")
