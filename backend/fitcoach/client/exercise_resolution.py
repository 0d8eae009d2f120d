import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from fitcoach.client.api_client import FitCoachClient
from fitcoach.client.errors import PartialResult
from fitcoach.client.plan_model import ExerciseRef, normalize_key
from fitcoach.schemas.exercise import LibraryExercise

logger = logging.getLogger(__name__)


@dataclass
class ResolvedLibrary:
    by_name: Dict[str, LibraryExercise] = field(default_factory=dict)
    by_id: Dict[str, LibraryExercise] = field(default_factory=dict)


@dataclass
class EnrichmentResult:
    exercise: LibraryExercise
    partial: Optional[PartialResult] = None


class ExerciseResolver:
    """
    Session cache mapping plan exercise references to library records.

    Lookups prefer the library id over the name: ids are unique, names
    may collide. Enriched records are merged in so later renders of the
    same exercise reuse them.
    """

    def __init__(self, client: FitCoachClient, language: str = "pt"):
        self.client = client
        self.language = language
        self.by_name: Dict[str, LibraryExercise] = {}
        self.by_id: Dict[str, LibraryExercise] = {}
        self.loaded_day: Optional[int] = None

    async def resolve_batch(self, refs: List[ExerciseRef]) -> ResolvedLibrary:
        """One match request for the distinct references in `refs`."""
        payload = []
        seen = set()
        for ref in refs:
            if ref.is_empty():
                continue
            key = (ref.exercise_id, ref.name_key)
            if key in seen:
                continue
            seen.add(key)
            payload.append({"name": ref.name or None, "exerciseId": ref.exercise_id})

        if not payload:
            return ResolvedLibrary()

        body = await self.client.match_exercises(payload) or {}
        return ResolvedLibrary(
            by_name={normalize_key(k): LibraryExercise.model_validate(v) for k, v in (body.get("exercises") or {}).items()},
            by_id={k: LibraryExercise.model_validate(v) for k, v in (body.get("exercisesById") or {}).items()},
        )

    def apply(self, resolved: ResolvedLibrary) -> None:
        self.by_name.update(resolved.by_name)
        self.by_id.update(resolved.by_id)

    async def load_day(self, day: int, refs: List[ExerciseRef], selected_day: Callable[[], int]) -> bool:
        """
        Resolve the references of `day` and apply them only if `day` is
        still the selected one when the response arrives. Returns whether
        the result was applied.
        """
        resolved = await self.resolve_batch(refs)
        if selected_day() != day:
            logger.debug(f"[Resolver] Discarding exercise match for day {day}, now on day {selected_day()}")
            return False
        self.apply(resolved)
        self.loaded_day = day
        return True

    def lookup(self, ref: ExerciseRef) -> Optional[LibraryExercise]:
        if ref.exercise_id and ref.exercise_id in self.by_id:
            return self.by_id[ref.exercise_id]
        return self.by_name.get(ref.name_key)

    async def enrich_one(self, ref: ExerciseRef) -> EnrichmentResult:
        """
        Ask the backend to build a library record for an unmatched
        reference. GenerationError and NetworkFailure propagate and leave
        the cache untouched.
        """
        body = await self.client.enrich_exercise(
            ref.name, ref.exercise_id, ref.equipment_used, self.language
        )
        exercise = LibraryExercise.model_validate(body["exercise"])
        missing = body.get("missingFields") or []

        self.by_name[ref.name_key] = exercise
        self.by_name.setdefault(normalize_key(exercise.name), exercise)
        if exercise.id:
            self.by_id[exercise.id] = exercise

        partial = PartialResult(missing_fields=missing) if missing else None
        if partial:
            logger.warning(f"[Resolver] {partial.warning} ({ref.name})")
        return EnrichmentResult(exercise=exercise, partial=partial)
