import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fitcoach.database import get_db
from fitcoach.crud import exercise as crud_exercise
from fitcoach.schemas.exercise import (
    LibraryExercise, ExerciseMatchRequest, ExerciseMatchResponse, EnrichRequest, EnrichResponse, SeedResponse,
)
from fitcoach.services import exercise_service
from fitcoach.services.llm_service import GenerationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/exercises", tags=["Exercises"])


@router.get("", response_model=List[LibraryExercise])
def list_exercises(equipment: Optional[str] = None, db: Session = Depends(get_db)):
    return crud_exercise.list_exercises(db, equipment)


@router.post("/match", response_model=ExerciseMatchResponse)
def match_exercises(request: ExerciseMatchRequest, db: Session = Depends(get_db)):
    """
    Batch lookup for the exercises of a plan day. Ids are matched exactly,
    names loosely; anything unmatched is simply absent from the result.
    """
    refs = [{"exercise_id": r.exercise_id, "name": r.name} for r in request.exercises]
    by_name, by_id = crud_exercise.match_exercises(db, refs)
    return ExerciseMatchResponse(
        exercises={name: LibraryExercise.model_validate(ex) for name, ex in by_name.items()},
        exercises_by_id={ex_id: LibraryExercise.model_validate(ex) for ex_id, ex in by_id.items()},
    )


@router.post("/enrich", response_model=EnrichResponse)
def enrich_exercise(request: EnrichRequest, db: Session = Depends(get_db)):
    if not request.name.strip():
        raise HTTPException(status_code=400, detail="Exercise name is required")

    try:
        exercise, missing = exercise_service.enrich_exercise(
            db, request.name.strip(), request.exercise_id, request.equipment
        )
    except GenerationError as e:
        logger.error(f"Exercise enrichment failed for '{request.name}': {e}")
        raise HTTPException(status_code=500, detail="Failed to enrich exercise")

    return EnrichResponse(exercise=LibraryExercise.model_validate(exercise), missing_fields=missing)


@router.post("/seed", response_model=SeedResponse)
def seed_exercises(db: Session = Depends(get_db)):
    count = exercise_service.seed_library(db)
    return SeedResponse(count=count, message=f"Seeded {count} exercises")


@router.get("/{exercise_id}", response_model=LibraryExercise)
def get_exercise(exercise_id: str, db: Session = Depends(get_db)):
    exercise = crud_exercise.get_exercise(db, exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise
