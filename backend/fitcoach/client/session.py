"""
Dashboard session store.

One DashboardSession per open dashboard: it owns the plan being shown, the
selected day, the exercise cache, the meal overrides, the plan list and
the running workout. Views read from it and call its operations; nothing
here is global.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from fitcoach.client.api_client import FitCoachClient
from fitcoach.client.errors import CoachError, NotFound, ValidationFailure
from fitcoach.client.exercise_resolution import ExerciseResolver
from fitcoach.client.meal_overrides import EffectiveMeal, MealOverride, MealOverrideLayer
from fitcoach.client.plan_model import ExerciseRef, Meal, Plan, ProgressRecord
from fitcoach.client.plan_versions import PlanVersions
from fitcoach.client.workout_session import Phase, WorkoutSession, WorkoutTicker
from fitcoach.schemas.exercise import LibraryExercise

logger = logging.getLogger(__name__)

DIFFICULTIES = ("easy", "just right", "hard")


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Ready:
    pass


@dataclass(frozen=True)
class Error:
    message: str


LoadState = Union[Idle, Loading, Ready, Error]


@dataclass
class ResolvedExercise:
    ref: ExerciseRef
    library: Optional[LibraryExercise] = None


class DashboardSession:

    def __init__(self, client: FitCoachClient, user_id: int, language: str = "pt"):
        self.client = client
        self.user_id = user_id
        self.language = language

        self.resolver = ExerciseResolver(client, language)
        self.meals = MealOverrideLayer(client, user_id, language=language)
        self.versions = PlanVersions(client, user_id)

        self.state: LoadState = Idle()
        self.plan: Optional[Plan] = None
        self.progress: List[ProgressRecord] = []
        self.selected_day = 1

        self.workout: Optional[WorkoutSession] = None
        self.ticker: Optional[WorkoutTicker] = None
        self._workout_day: Optional[int] = None
        self._workout_recorded = False
        self._pending_record: Optional[ProgressRecord] = None
        self.warnings: List[str] = []

    @property
    def has_plan(self) -> bool:
        return self.plan is not None

    async def load(self) -> LoadState:
        """
        Fetch the dashboard plan with its overrides, the plan list and the
        exercises of the current day. No plan at all is a Ready state with
        `plan` None, not an error. Once the plan itself is in, a failed
        fetch of the rest leaves a Ready state on plan defaults and adds
        to `warnings`.
        """
        self.state = Loading()
        self.warnings = []
        try:
            body = await self.client.get_plan(self.user_id)
        except NotFound:
            self.plan = None
            self.progress = []
            self.meals.overrides = []
            self.meals.plan_id = None
            self.state = Ready()
            return self.state
        except CoachError as e:
            self.state = Error(e.message)
            return self.state

        self.plan = Plan.from_api(body)
        self.progress = [ProgressRecord.from_api(p) for p in body.get("progress") or []]
        self.selected_day = self.plan.clamp_day(self.plan.current_day)

        plan = self.plan
        parts = (
            ("meal overrides", lambda: self.meals.load(plan.id)),
            ("plan list", self.versions.list_plans),
            ("exercises", lambda: self.resolver.load_day(
                self.selected_day, plan.day_refs(self.selected_day), lambda: self.selected_day
            )),
        )
        for part, fetch in parts:
            try:
                await fetch()
            except CoachError as e:
                logger.warning(f"[Dashboard] Could not load {part} for user {self.user_id}: {e}")
                self.warnings.append(f"Could not load {part}: {e.message}")

        self.state = Ready()
        return self.state

    def _require_plan(self) -> Plan:
        if self.plan is None:
            raise ValidationFailure("No active plan")
        return self.plan

    # --- Day selection / derived views ---

    async def select_day(self, day: int) -> bool:
        """
        Show another plan day. Returns False if the user moved on before
        the exercise match for `day` came back.
        """
        plan = self._require_plan()
        day = plan.clamp_day(day)
        self.selected_day = day
        return await self.resolver.load_day(day, plan.day_refs(day), lambda: self.selected_day)

    def today_exercises(self) -> List[ResolvedExercise]:
        if self.plan is None:
            return []
        return [ResolvedExercise(ref, self.resolver.lookup(ref)) for ref in self.plan.day_refs(self.selected_day)]

    def today_meals(self) -> List[EffectiveMeal]:
        if self.plan is None:
            return []
        nutrition_day = self.plan.nutrition_day(self.selected_day)
        if nutrition_day is None:
            return []
        return [self.get_effective_meal(self.selected_day, slot) for slot in range(len(nutrition_day.meals))]

    def completion_count(self) -> int:
        """Distinct days with at least one progress record."""
        return len({p.day for p in self.progress})

    # --- Meals ---

    def _plan_meals(self, day: int):
        plan = self._require_plan()
        index = plan.nutrition_day_index(day)
        if index is None:
            return None, []
        return index, plan.nutrition_days[index].meals

    def get_effective_meal(self, day: int, slot: int) -> EffectiveMeal:
        index, meals = self._plan_meals(day)
        if index is None:
            return EffectiveMeal(meal=None)
        return self.meals.get_effective_meal(index, slot, meals)

    async def apply_meal_override(self, day: int, slot: int, new_meal: Meal, source: str = "swap") -> MealOverride:
        """
        Show `new_meal` in the slot right away, then persist it. A failed
        save leaves the new meal displayed and raises.
        """
        index, meals = self._plan_meals(day)
        if index is None:
            raise ValidationFailure("Plan has no nutrition days")
        original = meals[slot] if 0 <= slot < len(meals) else None
        override = self.meals.apply_override(index, slot, new_meal, original, source)
        return await self.meals.persist(override)

    async def revert_meal_override(self, override_id: int) -> None:
        await self.meals.revert_override(override_id)

    # --- Plans ---

    async def activate_plan(self, plan_id: int) -> LoadState:
        await self.versions.activate(plan_id)
        return await self.load()

    async def delete_plan(self, plan_id: int) -> LoadState:
        await self.versions.delete(plan_id)
        return await self.load()

    # --- Workout ---

    def start_workout(self, on_finished: Optional[Callable[[], None]] = None, use_timer: bool = True) -> WorkoutSession:
        """
        Start the workout of the selected day. `on_finished` fires once when
        the last item is done; recording the completion is a separate
        call so the user can rate the difficulty first.
        """
        plan = self._require_plan()
        if self.workout and self.workout.is_active:
            raise ValidationFailure("A workout is already running")

        day_plan = plan.day_plan(self.selected_day)
        if day_plan is None or day_plan.is_rest_day:
            raise ValidationFailure("No workout scheduled for this day")

        self.workout = WorkoutSession.from_day_plan(day_plan, on_complete=on_finished)
        self._workout_day = self.selected_day
        self._workout_recorded = False
        self._pending_record = None
        if use_timer:
            self.ticker = WorkoutTicker(self.workout)
            self.ticker.start()
        else:
            self.ticker = None
            self.workout.start()
        return self.workout

    def _control(self):
        if self.workout is None:
            raise ValidationFailure("No workout in progress")
        return self.ticker or self.workout

    def pause(self) -> None:
        self._control().pause()

    def resume(self) -> None:
        self._control().resume()

    def skip(self) -> None:
        self._control().skip()

    def abort(self) -> None:
        self._control().abort()

    async def record_completion(self, difficulty: str) -> ProgressRecord:
        """
        Record the finished workout once. The record is shown locally
        first and stays if the post fails, so the call can be retried
        without duplicating it. The plan day moves forward when the
        backend accepts it.
        """
        plan = self._require_plan()
        if self.workout is None or self.workout.phase != Phase.COMPLETED:
            raise ValidationFailure("Workout is not completed")
        if self._workout_recorded:
            raise ValidationFailure("Workout already recorded")
        if difficulty not in DIFFICULTIES:
            raise ValidationFailure(f"Unknown difficulty: {difficulty}")

        day = self._workout_day or self.selected_day
        record = ProgressRecord(user_id=self.user_id, plan_id=plan.id, day=day, difficulty=difficulty)
        self.progress = [p for p in self.progress if p is not self._pending_record]
        self.progress.append(record)
        self._pending_record = record

        await self.client.record_progress(self.user_id, plan.id, day, difficulty)
        self._workout_recorded = True
        self._pending_record = None
        plan.current_day = min(day + 1, plan.duration_days)
        return record

    # --- Coach ---

    async def send_coach_message(self, message: str) -> str:
        if not message or not message.strip():
            raise ValidationFailure("Message cannot be empty")
        body = await self.client.coach_message(self.user_id, message.strip(), self.language)
        return body["reply"]

    async def clear_coach_messages(self) -> None:
        await self.client.clear_coach_messages(self.user_id)

    async def regenerate_plan(self, feedback: Optional[str] = None) -> LoadState:
        """Coach-triggered regeneration; the new plan becomes the dashboard plan."""
        await self.client.regenerate_plan(self.user_id, feedback)
        return await self.load()
