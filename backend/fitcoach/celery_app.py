import platform
from celery import Celery
from celery.schedules import crontab

from fitcoach.config import REDIS_URL

# fork is unsafe with native extensions on macOS
pool_type = "solo" if platform.system() == "Darwin" else "prefork"

celery_app = Celery(
    "fitcoach",
    broker=REDIS_URL,
    backend=REDIS_URL,
    include=["fitcoach.tasks.reminders"]
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    worker_pool=pool_type,
    worker_prefetch_multiplier=1,
    beat_schedule={
        "water-reminders-sweep": {
            "task": "fitcoach.tasks.reminders.send_water_reminders",
            "schedule": crontab(minute="*/15"),
        },
    },
)
