import re
from typing import Dict, List, Optional, Tuple, Any
from sqlalchemy.orm import Session
from fitcoach.models.exercise import Exercise


def normalize_name(name: str) -> str:
    """Lowercase, collapse whitespace."""
    if not name:
        return ""
    return re.sub(r"\s+", " ", name.lower()).strip()


def slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", (name or "").lower()).strip("_")


def get_exercise(db: Session, exercise_id: str) -> Optional[Exercise]:
    return db.query(Exercise).filter(Exercise.id == exercise_id).first()


def list_exercises(db: Session, equipment: Optional[str] = None) -> List[Exercise]:
    query = db.query(Exercise)
    if equipment:
        query = query.filter(Exercise.equipment == equipment)
    return query.order_by(Exercise.name.asc()).all()


def find_by_name(exercises: List[Exercise], name: str) -> Optional[Exercise]:
    """
    Loose name match against English and Portuguese names, substring in
    either direction. First hit wins, so colliding names are ambiguous.
    """
    wanted = normalize_name(name)
    if not wanted:
        return None
    for ex in exercises:
        candidates = [normalize_name(ex.name), normalize_name(ex.name_pt or "")]
        for candidate in candidates:
            if candidate and (candidate in wanted or wanted in candidate):
                return ex
    return None


def match_exercises(db: Session, refs: List[Dict[str, Any]]) -> Tuple[Dict[str, Exercise], Dict[str, Exercise]]:
    """
    Resolve plan references against the library.
    Returns (by_name, by_id): by_name is keyed by the requested name,
    by_id by library id. Ids are looked up exactly, names loosely.
    """
    all_exercises = list_exercises(db)
    index = {ex.id: ex for ex in all_exercises}

    by_name: Dict[str, Exercise] = {}
    by_id: Dict[str, Exercise] = {}

    for ref in refs:
        exercise_id = ref.get("exercise_id")
        name = ref.get("name")

        if exercise_id and exercise_id in index:
            by_id[exercise_id] = index[exercise_id]

        if name and name not in by_name:
            match = find_by_name(all_exercises, name)
            if match:
                by_name[name] = match

    return by_name, by_id


def upsert_exercise(db: Session, fields: Dict[str, Any]) -> Exercise:
    exercise_id = fields.get("id") or slugify(fields["name"])
    exercise = get_exercise(db, exercise_id)
    if not exercise:
        exercise = Exercise(id=exercise_id)
        db.add(exercise)

    for key, value in fields.items():
        if key != "id" and hasattr(exercise, key) and value is not None:
            setattr(exercise, key, value)

    db.commit()
    db.refresh(exercise)
    return exercise


def seed_exercises(db: Session, records: List[Dict[str, Any]]) -> int:
    """
    Upsert curated records in one commit. A curated record replaces an
    AI-enriched row with the same id.
    """
    ids = [r["id"] for r in records]
    existing = {ex.id: ex for ex in db.query(Exercise).filter(Exercise.id.in_(ids)).all()}

    for record in records:
        exercise = existing.get(record["id"])
        if exercise is None:
            exercise = Exercise(id=record["id"])
            db.add(exercise)
            existing[exercise.id] = exercise
        for key, value in record.items():
            if key != "id" and hasattr(exercise, key):
                setattr(exercise, key, value)
        exercise.is_enriched = False

    db.commit()
    return len(existing)
