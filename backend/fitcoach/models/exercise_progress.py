from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from fitcoach.database import Base


class ExerciseProgress(Base):
    """
    One row per completed workout day. Append-only: a retried completion
    produces a second row for the same day.
    """
    __tablename__ = "exercise_progress"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user_profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    plan_id = Column(Integer, ForeignKey("fitness_plans.id", ondelete="CASCADE"), nullable=False, index=True)
    day = Column(Integer, nullable=False)
    completed = Column(Integer, default=1, nullable=False)  # 0 = not started, 1 = completed
    difficulty = Column(String(20), nullable=True)  # "easy", "just right", "hard"
    completed_at = Column(DateTime, default=datetime.utcnow)
    created_at = Column(DateTime, default=datetime.utcnow)

    plan = relationship("FitnessPlan", back_populates="progress")
