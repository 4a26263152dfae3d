from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from ..models import HistoryEntry, Routine, RoutineExercise, normalize_set_type
from .routine_exercises import get_routine_exercise


def list_for_exercise(session: Session, routine_exercise_id: int, owner: Optional[int] = None) -> List[HistoryEntry]:
    """Most recent first; same-day entries newest-inserted first.

    With ``owner`` given, history of someone else's exercise lists as empty.
    """
    query = session.query(HistoryEntry).filter(HistoryEntry.routine_exercise_id == routine_exercise_id)
    if owner is not None:
        query = (
            query.join(RoutineExercise, RoutineExercise.id == HistoryEntry.routine_exercise_id)
            .join(Routine, Routine.id == RoutineExercise.routine_id)
            .filter(Routine.owner_user_id == owner)
        )
    return query.order_by(HistoryEntry.recorded_at.desc(), HistoryEntry.id.desc()).all()


def list_for_user(session: Session, owner: int) -> List[Tuple[HistoryEntry, str]]:
    """Every entry reachable from the owner's routines, with the exercise name.

    Used by the front end for calendar and heatmap views.
    """
    rows = (
        session.query(HistoryEntry, RoutineExercise.exercise_name)
        .join(RoutineExercise, RoutineExercise.id == HistoryEntry.routine_exercise_id)
        .join(Routine, Routine.id == RoutineExercise.routine_id)
        .filter(Routine.owner_user_id == owner)
        .order_by(HistoryEntry.recorded_at.desc(), HistoryEntry.id.desc())
        .all()
    )
    return [(entry, name) for entry, name in rows]


def append_entry(
    session: Session,
    routine_exercise_id: int,
    weight: float,
    reps: int,
    set_type: str,
    recorded_at: date,
    owner: Optional[int] = None,
) -> int:
    get_routine_exercise(session, routine_exercise_id, owner)
    entry = HistoryEntry(
        routine_exercise_id=routine_exercise_id,
        weight=weight,
        reps=reps,
        set_type=normalize_set_type(set_type),
        recorded_at=recorded_at,
    )
    session.add(entry)
    session.flush()
    return entry.id
