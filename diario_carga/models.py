from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from sqlalchemy import Boolean, Date, Float, ForeignKey, Index, Integer, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .db import Base


class SetType(str, Enum):
    WORKING = "working"
    WARMUP = "warmup"
    DROP_SET = "drop_set"

    @classmethod
    def _missing_(cls, value):
        # labels sent by the original front end
        if isinstance(value, str):
            return _SET_TYPE_LABELS.get(value.strip().lower())
        return None


_SET_TYPE_LABELS = {
    "normal": SetType.WORKING,
    "trabalho": SetType.WORKING,
    "aquecimento": SetType.WARMUP,
    "warm-up": SetType.WARMUP,
    "drop": SetType.DROP_SET,
    "drop-set": SetType.DROP_SET,
    "drop set": SetType.DROP_SET,
    "dropset": SetType.DROP_SET,
}


def normalize_set_type(value: str) -> str:
    """Map a known label onto its enum value; unknown tags are kept as sent."""
    try:
        return SetType(value).value
    except ValueError:
        return value.strip()


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    credential_digest: Mapped[str] = mapped_column(String(255), nullable=False)

    routines: Mapped[List["Routine"]] = relationship(
        "Routine", back_populates="owner", cascade="all, delete-orphan"
    )
    weights: Mapped[List["WeightEntry"]] = relationship(
        "WeightEntry", back_populates="owner", cascade="all, delete-orphan"
    )

    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)


class Routine(Base):
    __tablename__ = "routines"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    owner_user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    weekday_label: Mapped[Optional[str]] = mapped_column(String(32))

    owner: Mapped[User] = relationship("User", back_populates="routines")
    exercises: Mapped[List["RoutineExercise"]] = relationship(
        "RoutineExercise", back_populates="routine", cascade="all, delete-orphan"
    )

    __table_args__ = (Index("ix_routines_owner", "owner_user_id"),)


class RoutineExercise(Base):
    __tablename__ = "routine_exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    routine_id: Mapped[int] = mapped_column(ForeignKey("routines.id", ondelete="CASCADE"), nullable=False)
    exercise_name: Mapped[str] = mapped_column(String(128), nullable=False)
    muscle_group: Mapped[Optional[str]] = mapped_column(String(64))
    setup_notes: Mapped[Optional[str]] = mapped_column(Text)
    is_superset: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    order_index: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    routine: Mapped[Routine] = relationship("Routine", back_populates="exercises")
    history: Mapped[List["HistoryEntry"]] = relationship(
        "HistoryEntry", back_populates="routine_exercise", cascade="all, delete-orphan"
    )

    __table_args__ = (Index("ix_routine_exercises_routine_order", "routine_id", "order_index"),)


class HistoryEntry(Base):
    __tablename__ = "history_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    routine_exercise_id: Mapped[int] = mapped_column(
        ForeignKey("routine_exercises.id", ondelete="CASCADE"), nullable=False
    )
    weight: Mapped[float] = mapped_column(Float, nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    set_type: Mapped[str] = mapped_column(String(32), default=SetType.WORKING.value, nullable=False)
    recorded_at: Mapped[date] = mapped_column(Date, nullable=False)

    routine_exercise: Mapped[RoutineExercise] = relationship("RoutineExercise", back_populates="history")

    __table_args__ = (Index("ix_history_exercise_date", "routine_exercise_id", "recorded_at"),)


class WeightEntry(Base):
    __tablename__ = "weight_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    owner_user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    weight: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False)
    recorded_at: Mapped[date] = mapped_column(Date, nullable=False)

    owner: Mapped[User] = relationship("User", back_populates="weights")

    __table_args__ = (Index("ix_weight_entries_owner_date", "owner_user_id", "recorded_at"),)


class LibraryExercise(Base):
    __tablename__ = "library_exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    muscle_group: Mapped[Optional[str]] = mapped_column(String(64))
    equipment: Mapped[Optional[str]] = mapped_column(String(64))
    description: Mapped[Optional[str]] = mapped_column(Text)

    __table_args__ = (UniqueConstraint("name", name="uq_library_exercises_name"),)
