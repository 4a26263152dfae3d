from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..errors import NotFoundError
from ..models import Routine, RoutineExercise
from .routines import get_routine


def list_routine_exercises(session: Session, routine_id: int, owner: Optional[int] = None) -> List[RoutineExercise]:
    """Exercises of a routine in display order: ``order_index`` then ``id``.

    With ``owner`` given, a routine belonging to someone else lists as empty.
    """
    query = session.query(RoutineExercise).filter(RoutineExercise.routine_id == routine_id)
    if owner is not None:
        query = query.join(Routine, Routine.id == RoutineExercise.routine_id).filter(Routine.owner_user_id == owner)
    return query.order_by(RoutineExercise.order_index.asc(), RoutineExercise.id.asc()).all()


def _next_order_index(session: Session, routine_id: int) -> int:
    current = (
        session.query(func.max(RoutineExercise.order_index)).filter(RoutineExercise.routine_id == routine_id).scalar()
    )
    return 0 if current is None else current + 1


def get_routine_exercise(session: Session, routine_exercise_id: int, owner: Optional[int] = None) -> RoutineExercise:
    item = session.get(RoutineExercise, routine_exercise_id)
    if item is None or (owner is not None and item.routine.owner_user_id != owner):
        raise NotFoundError("Exercício não encontrado.")
    return item


def create_routine_exercise(
    session: Session,
    routine_id: int,
    exercise_name: str,
    muscle_group: Optional[str],
    order_index: Optional[int] = None,
    owner: Optional[int] = None,
) -> int:
    get_routine(session, routine_id, owner)
    if order_index is None:
        order_index = _next_order_index(session, routine_id)
    item = RoutineExercise(
        routine_id=routine_id,
        exercise_name=exercise_name,
        muscle_group=muscle_group,
        setup_notes=None,
        is_superset=False,
        order_index=order_index,
    )
    session.add(item)
    session.flush()
    return item.id


def update_notes(
    session: Session,
    routine_exercise_id: int,
    setup_notes: Optional[str],
    is_superset: bool,
    owner: Optional[int] = None,
) -> RoutineExercise:
    item = get_routine_exercise(session, routine_exercise_id, owner)
    item.setup_notes = setup_notes
    item.is_superset = is_superset
    return item


def delete_routine_exercise(session: Session, routine_exercise_id: int, owner: Optional[int] = None) -> None:
    """Delete an exercise and the history recorded against it."""
    item = get_routine_exercise(session, routine_exercise_id, owner)
    session.delete(item)
    session.flush()
