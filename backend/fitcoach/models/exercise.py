from sqlalchemy import Column, String, Boolean, Text
from sqlalchemy.dialects.postgresql import JSONB
from fitcoach.database import Base


class Exercise(Base):
    __tablename__ = "exercises"

    id = Column(String(100), primary_key=True, index=True)  # slug, e.g. "bench_step_up"
    name = Column(String, index=True, nullable=False)
    name_pt = Column(String, index=True, nullable=True)
    category = Column(String, nullable=True)  # e.g. Strength, Cardio, Mobility
    primary_muscles = Column(JSONB, nullable=True)
    secondary_muscles = Column(JSONB, nullable=True)
    equipment = Column(String, nullable=True)
    difficulty = Column(String, nullable=True)  # beginner / intermediate / advanced
    image_url = Column(String, nullable=True)
    video_url = Column(String, nullable=True)
    instructions = Column(Text, nullable=True)
    instructions_pt = Column(Text, nullable=True)

    # True when the row was created by AI enrichment rather than seeded
    is_enriched = Column(Boolean, default=False)
