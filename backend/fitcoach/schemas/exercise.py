from typing import List, Dict, Optional
from fitcoach.schemas.base import CamelModel


class ExerciseRefIn(CamelModel):
    name: Optional[str] = None
    exercise_id: Optional[str] = None


class ExerciseMatchRequest(CamelModel):
    exercises: List[ExerciseRefIn]


class LibraryExercise(CamelModel):
    id: str
    name: str
    name_pt: Optional[str] = None
    category: Optional[str] = None
    primary_muscles: Optional[List[str]] = None
    secondary_muscles: Optional[List[str]] = None
    equipment: Optional[str] = None
    difficulty: Optional[str] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    instructions: Optional[str] = None
    instructions_pt: Optional[str] = None
    is_enriched: bool = False


class ExerciseMatchResponse(CamelModel):
    # Keyed by the requested name / by library id
    exercises: Dict[str, LibraryExercise]
    exercises_by_id: Dict[str, LibraryExercise]


class EnrichRequest(CamelModel):
    name: str
    exercise_id: Optional[str] = None
    equipment: Optional[str] = None
    language: str = "pt"


class EnrichResponse(CamelModel):
    exercise: LibraryExercise
    missing_fields: List[str] = []


class SeedResponse(CamelModel):
    count: int
    message: str
