from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from ..models import LibraryExercise


@dataclass
class LibraryItem:
    name: str
    muscle_group: Optional[str] = None
    equipment: Optional[str] = None
    description: Optional[str] = None


DEFAULT_LIBRARY: List[LibraryItem] = [
    LibraryItem(name="Supino reto", muscle_group="Peito", equipment="Barra"),
    LibraryItem(name="Supino inclinado com halteres", muscle_group="Peito", equipment="Halteres"),
    LibraryItem(name="Agachamento livre", muscle_group="Pernas", equipment="Barra"),
    LibraryItem(name="Leg press 45", muscle_group="Pernas", equipment="Máquina"),
    LibraryItem(name="Stiff", muscle_group="Posterior", equipment="Barra"),
    LibraryItem(name="Puxada frontal", muscle_group="Costas", equipment="Polia"),
    LibraryItem(name="Remada curvada", muscle_group="Costas", equipment="Barra"),
    LibraryItem(name="Desenvolvimento com halteres", muscle_group="Ombros", equipment="Halteres"),
    LibraryItem(name="Elevação lateral", muscle_group="Ombros", equipment="Halteres"),
    LibraryItem(name="Rosca direta", muscle_group="Bíceps", equipment="Barra"),
    LibraryItem(name="Tríceps corda", muscle_group="Tríceps", equipment="Polia"),
]


def list_library(session: Session) -> List[LibraryExercise]:
    return session.query(LibraryExercise).order_by(LibraryExercise.id).all()


def seed_library(session: Session, items: Iterable[LibraryItem]) -> int:
    """Insert catalog entries whose names are not present yet; returns how many were added."""
    existing = {name for (name,) in session.query(LibraryExercise.name).all()}
    added = 0
    for item in items:
        if item.name in existing:
            continue
        session.add(
            LibraryExercise(
                name=item.name,
                muscle_group=item.muscle_group,
                equipment=item.equipment,
                description=item.description,
            )
        )
        existing.add(item.name)
        added += 1
    session.flush()
    return added


def default_library() -> List[LibraryItem]:
    return list(DEFAULT_LIBRARY)
