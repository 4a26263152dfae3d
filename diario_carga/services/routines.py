from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..errors import NotFoundError
from ..models import Routine, User

logger = logging.getLogger(__name__)


def list_routines(session: Session, owner: int) -> List[Routine]:
    return session.query(Routine).filter(Routine.owner_user_id == owner).order_by(Routine.id).all()


def get_routine(session: Session, routine_id: int, owner: Optional[int] = None) -> Routine:
    """Load a routine, optionally requiring that ``owner`` owns it."""
    routine = session.get(Routine, routine_id)
    if routine is None or (owner is not None and routine.owner_user_id != owner):
        raise NotFoundError("Ficha não encontrada.")
    return routine


def create_routine(session: Session, owner: int, name: str, weekday_label: Optional[str]) -> int:
    if session.get(User, owner) is None:
        raise NotFoundError("Usuário não encontrado.")
    routine = Routine(owner_user_id=owner, name=name, weekday_label=weekday_label)
    session.add(routine)
    session.flush()
    return routine.id


def delete_routine(session: Session, routine_id: int, owner: Optional[int] = None) -> None:
    """Delete a routine together with its exercises and their history."""
    routine = get_routine(session, routine_id, owner)
    exercise_count = len(routine.exercises)
    session.delete(routine)
    session.flush()
    logger.info("Deleted routine %s with %s exercises", routine_id, exercise_count)
