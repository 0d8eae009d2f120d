import asyncio
import logging
from typing import Callable, List, Optional

from fitcoach.config import NOTIFICATION_POLL_BASE_SECONDS, NOTIFICATION_POLL_MAX_SECONDS, NOTIFICATION_POLL_BACKOFF
from fitcoach.client.api_client import FitCoachClient
from fitcoach.client.errors import CoachError
from fitcoach.schemas.notification import NotificationResponse

logger = logging.getLogger(__name__)


class NotificationPoller:
    """
    Periodically polls the backend for unread notifications.

    Failed polls back off geometrically (base * backoff ** failures) up to
    the ceiling; the first successful poll resets to the base interval.
    """

    def __init__(
        self,
        client: FitCoachClient,
        user_id: int,
        base_seconds: float = NOTIFICATION_POLL_BASE_SECONDS,
        max_seconds: float = NOTIFICATION_POLL_MAX_SECONDS,
        backoff: float = NOTIFICATION_POLL_BACKOFF,
        on_update: Optional[Callable[[List[NotificationResponse]], None]] = None,
    ):
        self.client = client
        self.user_id = user_id
        self.base_seconds = base_seconds
        self.max_seconds = max_seconds
        self.backoff = backoff
        self.on_update = on_update
        self.failures = 0
        self.notifications: List[NotificationResponse] = []
        self._task: Optional[asyncio.Task] = None

    @property
    def interval(self) -> float:
        return min(self.base_seconds * self.backoff ** self.failures, self.max_seconds)

    @property
    def unread_count(self) -> int:
        return len([n for n in self.notifications if not n.read])

    async def poll_once(self) -> bool:
        try:
            body = await self.client.poll_notifications(self.user_id)
        except CoachError as e:
            self.failures += 1
            logger.warning(f"[Notifications] Poll failed ({self.failures}), next in {self.interval:.0f}s: {e}")
            return False

        self.failures = 0
        self.notifications = [NotificationResponse.model_validate(n) for n in body or []]
        if self.on_update:
            self.on_update(self.notifications)
        return True

    async def run(self) -> None:
        while True:
            await self.poll_once()
            await asyncio.sleep(self.interval)

    def start(self) -> None:
        if self._task is None or self._task.done():
            self._task = asyncio.get_running_loop().create_task(self.run())

    def stop(self) -> None:
        if self._task and not self._task.done():
            self._task.cancel()
        self._task = None

    async def dismiss(self, notification_id: int) -> None:
        self.notifications = [n for n in self.notifications if n.id != notification_id]
        await self.client.mark_notification_read(notification_id)
