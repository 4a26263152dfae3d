from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from ..db import Database
from ..deps import IdentityResolver, get_db, get_mapper, get_resolver
from ..responses import ResponseMapperV1
from ..schemas import RoutineExerciseIn, RoutineExerciseNotesIn
from ..services import routine_exercises

router = APIRouter(prefix="/api", tags=["exercicios"])


@router.get("/exercicios")
async def list_routine_exercises(
    ficha_id: int,
    email: Optional[str] = None,
    db: Database = Depends(get_db),
    resolver: IdentityResolver = Depends(get_resolver),
    mapper: ResponseMapperV1 = Depends(get_mapper),
):
    owner = await resolver.resolve(email)
    rows = await db.run_without_commit(lambda s: routine_exercises.list_routine_exercises(s, ficha_id, owner))
    return [mapper.routine_exercise(row) for row in rows]


@router.post("/exercicios")
async def create_routine_exercise(
    body: RoutineExerciseIn,
    email: Optional[str] = None,
    db: Database = Depends(get_db),
    resolver: IdentityResolver = Depends(get_resolver),
    mapper: ResponseMapperV1 = Depends(get_mapper),
):
    owner = await resolver.resolve(email)
    item_id = await db.run(
        lambda s: routine_exercises.create_routine_exercise(
            s, body.ficha_id, body.name, body.group, body.order_index, owner
        )
    )
    return mapper.ok(id=item_id)


@router.put("/exercicios/{routine_exercise_id}")
async def update_routine_exercise(
    routine_exercise_id: int,
    body: RoutineExerciseNotesIn,
    db: Database = Depends(get_db),
    resolver: IdentityResolver = Depends(get_resolver),
    mapper: ResponseMapperV1 = Depends(get_mapper),
):
    owner = await resolver.resolve()

    def update(session) -> None:
        routine_exercises.update_notes(session, routine_exercise_id, body.notes, body.is_superset, owner)

    await db.run(update)
    return mapper.ok()


@router.delete("/exercicios/{routine_exercise_id}")
async def delete_routine_exercise(
    routine_exercise_id: int,
    email: Optional[str] = None,
    db: Database = Depends(get_db),
    resolver: IdentityResolver = Depends(get_resolver),
    mapper: ResponseMapperV1 = Depends(get_mapper),
):
    owner = await resolver.resolve(email)
    await db.run(lambda s: routine_exercises.delete_routine_exercise(s, routine_exercise_id, owner))
    return mapper.ok()
