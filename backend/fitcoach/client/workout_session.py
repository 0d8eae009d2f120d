"""
Workout Session
---------------
Sequences a day's workout: warmup -> main -> cooldown, then completed.

Timed items count down on tick() and advance on their own. Rep-based
items only advance on skip(), since a timer cannot count reps. Empty
phases are skipped. Pausing is a flag next to the phase, so a session is
e.g. (MAIN, paused) rather than a separate PAUSED state.
"""
import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from fitcoach.config import WORKOUT_TICK_SECONDS
from fitcoach.client.plan_model import DayPlan, ExerciseRef

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    WARMUP = "warmup"
    MAIN = "main"
    COOLDOWN = "cooldown"
    COMPLETED = "completed"
    ABORTED = "aborted"


ACTIVE_PHASES = (Phase.WARMUP, Phase.MAIN, Phase.COOLDOWN)


class InvalidTransition(Exception):
    pass


@dataclass
class WorkoutItem:
    name: str
    duration_seconds: Optional[int] = None
    sets: int = 1
    reps_or_time: Optional[str] = None
    exercise_id: Optional[str] = None

    @property
    def timed(self) -> bool:
        return bool(self.duration_seconds)

    @classmethod
    def from_ref(cls, ref: ExerciseRef) -> "WorkoutItem":
        return cls(
            name=ref.name,
            duration_seconds=ref.timed_seconds,
            sets=ref.sets,
            reps_or_time=ref.reps_or_time,
            exercise_id=ref.exercise_id,
        )


class WorkoutSession:

    def __init__(
        self,
        warmup: List[WorkoutItem],
        main: List[WorkoutItem],
        cooldown: List[WorkoutItem],
        on_complete: Optional[Callable[[], None]] = None,
    ):
        self._items = {
            Phase.WARMUP: list(warmup),
            Phase.MAIN: list(main),
            Phase.COOLDOWN: list(cooldown),
        }
        self.on_complete = on_complete
        self.phase = Phase.IDLE
        self.index = 0
        self.remaining: Optional[int] = None
        self.paused = False
        self._completion_notified = False

    @classmethod
    def from_day_plan(cls, day_plan: DayPlan, on_complete: Optional[Callable[[], None]] = None) -> "WorkoutSession":
        def items(refs: List[ExerciseRef]) -> List[WorkoutItem]:
            return [WorkoutItem.from_ref(r) for r in refs if not r.is_empty()]

        return cls(
            items(day_plan.warmup_exercises),
            items(day_plan.exercises),
            items(day_plan.cooldown_exercises),
            on_complete=on_complete,
        )

    @property
    def is_active(self) -> bool:
        return self.phase in ACTIVE_PHASES

    @property
    def is_running(self) -> bool:
        return self.is_active and not self.paused

    @property
    def current_item(self) -> Optional[WorkoutItem]:
        if not self.is_active:
            return None
        return self._items[self.phase][self.index]

    def items(self, phase: Phase) -> List[WorkoutItem]:
        return list(self._items.get(phase, []))

    def _require_active(self, action: str) -> None:
        if not self.is_active:
            raise InvalidTransition(f"Cannot {action} while {self.phase.value}")

    def _enter(self, phase: Phase, index: int = 0) -> None:
        self.phase = phase
        self.index = index
        self.remaining = self._items[phase][index].duration_seconds

    def _next_phase(self, after: Optional[Phase]) -> Optional[Phase]:
        start = 0 if after is None else ACTIVE_PHASES.index(after) + 1
        for phase in ACTIVE_PHASES[start:]:
            if self._items[phase]:
                return phase
        return None

    def _advance(self) -> None:
        if self.index + 1 < len(self._items[self.phase]):
            self._enter(self.phase, self.index + 1)
            return

        next_phase = self._next_phase(self.phase)
        if next_phase:
            self._enter(next_phase)
            return

        self.phase = Phase.COMPLETED
        self.index = 0
        self.remaining = None
        self.paused = False
        if not self._completion_notified:
            self._completion_notified = True
            logger.info("[Workout] Session completed")
            if self.on_complete:
                self.on_complete()

    def start(self) -> None:
        if self.phase != Phase.IDLE:
            raise InvalidTransition(f"Cannot start while {self.phase.value}")
        first = self._next_phase(None)
        if first is None:
            raise InvalidTransition("Workout has no exercises")
        self.paused = False
        self._enter(first)

    def tick(self, seconds: int = 1) -> None:
        """
        Count down the current timed item. A no-op while paused or on a
        rep-based item.
        """
        self._require_active("tick")
        if self.paused or self.remaining is None:
            return
        self.remaining = max(0, self.remaining - seconds)
        if self.remaining == 0:
            self._advance()

    def pause(self) -> None:
        self._require_active("pause")
        self.paused = True

    def resume(self) -> None:
        self._require_active("resume")
        self.paused = False

    def skip(self) -> None:
        """Advance exactly as the timer would, or confirm a rep-based item."""
        self._require_active("skip")
        self._advance()

    def abort(self) -> None:
        """
        Close the session from any started state, a finished one included.
        Nothing fires and nothing is recorded; aborting twice is a no-op.
        """
        if self.phase == Phase.IDLE:
            raise InvalidTransition("Cannot abort before the workout starts")
        self.phase = Phase.ABORTED
        self.remaining = None
        self.paused = False


class WorkoutTicker:
    """
    Drives WorkoutSession.tick() from an asyncio task with a fixed period.
    Pausing cancels the schedule; resuming starts a new one and leaves the
    remaining countdown alone.
    """

    def __init__(self, session: WorkoutSession, period: float = WORKOUT_TICK_SECONDS,
                 on_tick: Optional[Callable[[WorkoutSession], None]] = None):
        self.session = session
        self.period = period
        self.on_tick = on_tick
        self._task: Optional[asyncio.Task] = None

    @property
    def scheduled(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.session.phase == Phase.IDLE:
            self.session.start()
        self._schedule()

    def pause(self) -> None:
        self.session.pause()
        self._cancel()

    def resume(self) -> None:
        self.session.resume()
        self._schedule()

    def skip(self) -> None:
        self.session.skip()
        if not self.session.is_active:
            self._cancel()

    def abort(self) -> None:
        self.session.abort()
        self._cancel()

    def _schedule(self) -> None:
        self._cancel()
        self._task = asyncio.get_running_loop().create_task(self._run())

    def _cancel(self) -> None:
        if self._task and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _run(self) -> None:
        while self.session.is_running:
            await asyncio.sleep(self.period)
            if not self.session.is_running:
                break
            self.session.tick()
            if self.on_tick:
                self.on_tick(self.session)

    async def wait(self) -> None:
        """Wait for the current schedule to stop (completion, pause or abort)."""
        if self._task:
            try:
                await self._task
            except asyncio.CancelledError:
                pass
