from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from datetime import datetime
from fitcoach.database import Base


class CustomMeal(Base):
    """User override of a plan meal for one (day_index, meal_slot)."""
    __tablename__ = "custom_meals"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user_profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    plan_id = Column(Integer, ForeignKey("fitness_plans.id", ondelete="CASCADE"), nullable=False, index=True)

    day_index = Column(Integer, nullable=False)  # nutrition day index (0-based)
    meal_slot = Column(Integer, nullable=False)  # position in the day's meal list

    custom_meal = Column(JSONB, nullable=False)
    original_meal = Column(JSONB, nullable=True)
    source = Column(String(20), default="swap")  # "swap" or "ai_ingredients"

    created_at = Column(DateTime, default=datetime.utcnow)

    plan = relationship("FitnessPlan", back_populates="custom_meals")

    __table_args__ = (
        UniqueConstraint("plan_id", "day_index", "meal_slot", name="uq_custom_meal_slot"),
    )
