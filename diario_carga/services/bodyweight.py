from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from ..errors import NotFoundError
from ..models import User, WeightEntry


def list_weights(session: Session, owner: int) -> List[WeightEntry]:
    return (
        session.query(WeightEntry)
        .filter(WeightEntry.owner_user_id == owner)
        .order_by(WeightEntry.recorded_at.asc(), WeightEntry.id.asc())
        .all()
    )


def append_weight(session: Session, owner: int, weight: Decimal, recorded_at: date) -> int:
    if session.get(User, owner) is None:
        raise NotFoundError("Usuário não encontrado.")
    entry = WeightEntry(owner_user_id=owner, weight=weight, recorded_at=recorded_at)
    session.add(entry)
    session.flush()
    return entry.id
