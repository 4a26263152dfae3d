"""Request bodies.

Every field also accepts the Portuguese name the original front end sends.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .models import SetType


class _Body(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class LoginIn(_Body):
    email: str = Field(min_length=1)
    secret: str = Field(min_length=1, validation_alias=AliasChoices("secret", "senha", "password"))


class RegisterIn(_Body):
    name: str = Field(min_length=1, validation_alias=AliasChoices("name", "nome"))
    email: str = Field(min_length=1)
    secret: str = Field(min_length=1, validation_alias=AliasChoices("secret", "senha", "password"))


class RoutineIn(_Body):
    user_email: Optional[str] = Field(default=None, validation_alias=AliasChoices("user_email", "email"))
    name: str = Field(min_length=1, validation_alias=AliasChoices("name", "nome"))
    weekday_label: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("weekday_label", "dia", "dia_semana")
    )


class RoutineExerciseIn(_Body):
    ficha_id: int = Field(validation_alias=AliasChoices("ficha_id", "routine_id"))
    name: str = Field(min_length=1, validation_alias=AliasChoices("name", "nome", "exercise_name"))
    group: Optional[str] = Field(default=None, validation_alias=AliasChoices("group", "grupo", "muscle_group"))
    order_index: Optional[int] = Field(default=None, validation_alias=AliasChoices("order_index", "ordem"))


class RoutineExerciseNotesIn(_Body):
    notes: Optional[str] = Field(default=None, validation_alias=AliasChoices("notes", "setup_notes"))
    is_superset: bool = Field(default=False, validation_alias=AliasChoices("is_superset", "is_biset"))


class HistoryIn(_Body):
    routine_exercise_id: int = Field(validation_alias=AliasChoices("routine_exercise_id", "ficha_exercicio_id"))
    weight: float = Field(ge=0, validation_alias=AliasChoices("weight", "peso"))
    reps: int = Field(ge=0, validation_alias=AliasChoices("reps", "repeticoes"))
    set_type: str = Field(
        default=SetType.WORKING.value, min_length=1, max_length=32, validation_alias=AliasChoices("type", "set_type", "tipo")
    )
    recorded_at: date = Field(validation_alias=AliasChoices("date", "recorded_at", "data_registro"))


class WeightIn(_Body):
    user_email: Optional[str] = Field(default=None, validation_alias=AliasChoices("user_email", "email"))
    weight: Decimal = Field(gt=0, max_digits=6, decimal_places=2, validation_alias=AliasChoices("weight", "peso"))
    recorded_at: date = Field(validation_alias=AliasChoices("date", "recorded_at", "data_registro"))
