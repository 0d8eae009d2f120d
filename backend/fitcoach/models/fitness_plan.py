from sqlalchemy import Column, Integer, Boolean, ForeignKey, DateTime
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from datetime import datetime
from fitcoach.database import Base


class FitnessPlan(Base):
    __tablename__ = "fitness_plans"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user_profiles.id", ondelete="CASCADE"), nullable=False, index=True)

    # Entire generated plan (fitness days, nutrition days, summary)
    plan_data = Column(JSONB, nullable=False)

    current_day = Column(Integer, default=1, nullable=False)
    duration_days = Column(Integer, default=30, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    start_date = Column(DateTime, default=datetime.utcnow)
    end_date = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("UserProfile", back_populates="plans")
    progress = relationship("ExerciseProgress", back_populates="plan", cascade="all, delete-orphan")
    custom_meals = relationship("CustomMeal", back_populates="plan", cascade="all, delete-orphan")
