import os
from dotenv import load_dotenv

load_dotenv(override=False)

SQLALCHEMY_DATABASE_URL = os.getenv("SQLALCHEMY_DATABASE_URL", "sqlite:///./fitcoach.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Comma separated, "*" allows any origin
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# LLM Selection Configuration
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "ollama").lower()  # Options: ollama, openrouter, openai
LLM_API_KEY = os.getenv("LLM_API_KEY") or os.getenv("OPENROUTER_API_KEY")
LLM_MODEL = os.getenv("LLM_MODEL")  # Optional override
OLLAMA_URL = os.getenv("OLLAMA_URL", "http://localhost:11434")

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

# Plans
DEFAULT_PLAN_DURATION_DAYS = int(os.getenv("DEFAULT_PLAN_DURATION_DAYS", "30"))
MIN_PLAN_DURATION_DAYS = 30
MAX_PLAN_DURATION_DAYS = 90

# Load the bundled exercise library on every start (upsert, idempotent)
SEED_EXERCISES_ON_STARTUP = os.getenv("SEED_EXERCISES_ON_STARTUP", "true").lower() in ("1", "true", "yes")

# Coaching client (talks to this API over HTTP)
FITCOACH_API_URL = os.getenv("FITCOACH_API_URL", "http://localhost:8000")
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))

# Notification polling: base * backoff ** failures, capped at max
NOTIFICATION_POLL_BASE_SECONDS = float(os.getenv("NOTIFICATION_POLL_BASE_SECONDS", "60"))
NOTIFICATION_POLL_MAX_SECONDS = float(os.getenv("NOTIFICATION_POLL_MAX_SECONDS", "300"))
NOTIFICATION_POLL_BACKOFF = float(os.getenv("NOTIFICATION_POLL_BACKOFF", "1.5"))

# Workout timer period
WORKOUT_TICK_SECONDS = float(os.getenv("WORKOUT_TICK_SECONDS", "1.0"))
