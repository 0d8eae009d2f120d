import copy

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from fitcoach.database import Base
import fitcoach.models  # noqa: F401
from fitcoach.crud import fitness_plan as crud_plan
from fitcoach.models.user_profile import UserProfile

# One shared in-memory SQLite DB (StaticPool keeps the single connection alive)
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False}, poolclass=StaticPool)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PLAN_DATA = {
    "plan_summary": "Two day full body cycle",
    "fitness_plan_7_days": [
        {
            "day": 1,
            "is_rest_day": False,
            "workout_name": "Full Body A",
            "duration_minutes": 30,
            "estimated_calories_burnt": 250,
            "warmup_exercises": [{"name": "High Knees", "name_pt": "Joelhos Altos", "duration_seconds": 30}],
            "exercises": [
                {"name": "Push Up", "name_pt": "Flexão", "exerciseId": "push_up", "sets": 3, "reps_or_time": "12 reps"},
                {"name": "Plank", "name_pt": "Prancha", "sets": 3, "reps_or_time": "45 sec"},
            ],
            "cooldown_exercises": [{"name": "Quad Stretch", "duration_seconds": 20}],
        },
        {
            "day": 2,
            "is_rest_day": True,
            "workout_name": "Rest",
            "warmup_exercises": [],
            "exercises": [],
            "cooldown_exercises": [],
        },
    ],
    "nutrition_plan_7_days": [
        {
            "day": 1,
            "total_daily_calories": 2000,
            "total_daily_macros": "P: 150g, C: 200g, F: 60g",
            "meals": [
                {"meal_time": "Breakfast", "description": "Oats with banana", "ingredients": "oats, banana",
                 "calories": 400, "protein_g": 15, "carbs_g": 70, "fat_g": 8},
                {"meal_time": "Lunch", "description": "Chicken and rice", "ingredients": "chicken, rice",
                 "calories": 650, "protein_g": 50, "carbs_g": 70, "fat_g": 15},
            ],
        },
    ],
}


def plan_data():
    return copy.deepcopy(PLAN_DATA)


def make_profile(db, **overrides):
    fields = dict(
        sex="male", age=30, weight=80, height=180, goal="muscle", activity_level="moderate",
        equipment=["Dumbbells"], time_per_day=30, difficulty="medium", language="en", timezone="UTC",
    )
    fields.update(overrides)
    profile = UserProfile(**fields)
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


def make_plan(db, user_id, duration_days=30, activate=True, data=None):
    return crud_plan.create_plan(db, user_id, data or plan_data(), duration_days, activate=activate)
