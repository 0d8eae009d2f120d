import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fitcoach.config import LOG_LEVEL, CORS_ORIGINS, SEED_EXERCISES_ON_STARTUP
from fitcoach.database import engine, Base, SessionLocal
import fitcoach.models  # noqa: F401
from fitcoach.api import plans, progress, exercises, nutrition, notifications, coach, login
from fitcoach.services import exercise_service

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
logger = logging.getLogger(__name__)


def run_migrations():
    """Apply pending Alembic migrations, then make sure every table exists."""
    try:
        from alembic.config import Config
        from alembic import command
        alembic_cfg = Config("alembic.ini")
        command.upgrade(alembic_cfg, "head")
        logger.info("[Alembic] Migrations applied successfully")
    except Exception as e:
        logger.warning(f"[Alembic] Migration failed, falling back to create_all: {e}")

    Base.metadata.create_all(bind=engine)


def seed_exercise_library():
    db = SessionLocal()
    try:
        exercise_service.seed_library(db)
    except Exception as e:
        logger.error(f"[Startup] Seeding the exercise library failed: {e}")
    finally:
        db.close()


app = FastAPI(title="FitCoach API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(plans.router)
app.include_router(progress.router)
app.include_router(exercises.router)
app.include_router(nutrition.router)
app.include_router(notifications.router)
app.include_router(coach.router)
app.include_router(login.router)


@app.on_event("startup")
def on_startup():
    run_migrations()
    if SEED_EXERCISES_ON_STARTUP:
        seed_exercise_library()


@app.get("/")
def root():
    return {
        "message": "Welcome to FitCoach API",
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
def health_check():
    return {"status": "healthy", "message": "API is running"}
