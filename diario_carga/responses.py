"""Response shaping for the HTTP layer.

Routers hand ORM rows to a mapper and never rename fields themselves.
``v1`` uses the API's own field names; ``legacy`` reproduces the payloads the
original single-page front end was written against.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .models import HistoryEntry, LibraryExercise, Routine, RoutineExercise, User, WeightEntry

Payload = Dict[str, Any]


class ResponseMapperV1:
    version = "v1"
    ok_key = "ok"

    def ok(self, **extra: Any) -> Payload:
        return {self.ok_key: True, **extra}

    def error(self, kind: str, message: str) -> Payload:
        return {self.ok_key: False, "error": kind, "message": message}

    def login(self, user: User) -> Payload:
        return self.ok(user={"name": user.name, "email": user.email})

    def routine(self, routine: Routine) -> Payload:
        return {"id": routine.id, "name": routine.name, "weekday_label": routine.weekday_label}

    def routine_exercise(self, item: RoutineExercise) -> Payload:
        return {
            "id": item.id,
            "ficha_id": item.routine_id,
            "exercise_name": item.exercise_name,
            "muscle_group": item.muscle_group,
            "setup_notes": item.setup_notes,
            "is_superset": item.is_superset,
            "order_index": item.order_index,
        }

    def history_entry(self, entry: HistoryEntry, exercise_name: Optional[str] = None) -> Payload:
        payload: Payload = {
            "id": entry.id,
            "routine_exercise_id": entry.routine_exercise_id,
            "weight": entry.weight,
            "reps": entry.reps,
            "set_type": entry.set_type,
            "recorded_at": entry.recorded_at.isoformat(),
        }
        if exercise_name is not None:
            payload["exercise_name"] = exercise_name
        return payload

    def weight_entry(self, entry: WeightEntry) -> Payload:
        return {"weight": float(entry.weight), "date": entry.recorded_at.isoformat()}

    def library_exercise(self, item: LibraryExercise) -> Payload:
        return {
            "id": item.id,
            "name": item.name,
            "muscle_group": item.muscle_group,
            "equipment": item.equipment,
            "description": item.description,
        }


class LegacyResponseMapper(ResponseMapperV1):
    version = "legacy"
    ok_key = "success"

    def login(self, user: User) -> Payload:
        return self.ok(user={"nome": user.name, "email": user.email}, message="Logado!")

    def routine(self, routine: Routine) -> Payload:
        return {
            "id": routine.id,
            "nome": routine.name,
            "dia_semana": routine.weekday_label,
            "dia": routine.weekday_label,
        }

    def routine_exercise(self, item: RoutineExercise) -> Payload:
        return {
            "id": item.id,
            "ficha_id": item.routine_id,
            "nome_exercicio": item.exercise_name,
            "grupo_muscular": item.muscle_group,
            "setup_notes": item.setup_notes,
            "is_biset": item.is_superset,
        }

    def history_entry(self, entry: HistoryEntry, exercise_name: Optional[str] = None) -> Payload:
        payload: Payload = {
            "id": entry.id,
            "ficha_exercicio_id": entry.routine_exercise_id,
            "peso": entry.weight,
            "repeticoes": entry.reps,
            "tipo_serie": entry.set_type,
            "data_registro": entry.recorded_at.isoformat(),
        }
        if exercise_name is not None:
            payload["nome_exercicio"] = exercise_name
        return payload

    def library_exercise(self, item: LibraryExercise) -> Payload:
        return {
            "id": item.id,
            "nome": item.name,
            "grupo_muscular": item.muscle_group,
            "equipamento": item.equipment,
            "descricao": item.description,
        }


_MAPPERS = {
    ResponseMapperV1.version: ResponseMapperV1(),
    LegacyResponseMapper.version: LegacyResponseMapper(),
}


def get_mapper(version: str) -> ResponseMapperV1:
    try:
        return _MAPPERS[version]
    except KeyError:
        raise ValueError(f"Unknown response format: {version}") from None
