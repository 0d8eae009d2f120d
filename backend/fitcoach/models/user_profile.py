from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from datetime import datetime
from fitcoach.database import Base


class UserProfile(Base):
    __tablename__ = "user_profiles"

    id = Column(Integer, primary_key=True, index=True)

    # Onboarding inputs
    sex = Column(String(20), nullable=False)
    age = Column(Integer, nullable=False)
    weight = Column(Integer, nullable=False)  # kg
    height = Column(Integer, nullable=False)  # cm
    goal = Column(String(50), nullable=False)  # "loss", "muscle", "endurance", "gain"
    activity_level = Column(String(50), nullable=False)
    equipment = Column(JSONB, nullable=True)  # ["Dumbbells 4kg", ...]
    impediments = Column(String, nullable=True)

    time_per_day = Column(Integer, default=45)  # workout minutes
    difficulty = Column(String(20), default="medium")  # "very_easy" .. "very_hard"
    language = Column(String(5), default="pt")
    timezone = Column(String(50), default="UTC")  # e.g. "Europe/Lisbon"

    # Optional phone + PIN login; the PIN is stored as an argon2 hash
    phone_number = Column(String(30), unique=True, index=True, nullable=True)
    pin_hash = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    plans = relationship("FitnessPlan", back_populates="user", cascade="all, delete-orphan")
    notification_settings = relationship(
        "NotificationSettings", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
