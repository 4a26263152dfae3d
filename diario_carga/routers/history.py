from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from ..db import Database
from ..deps import IdentityResolver, get_db, get_mapper, get_resolver
from ..responses import ResponseMapperV1
from ..schemas import HistoryIn
from ..services import history

router = APIRouter(prefix="/api", tags=["historico"])


@router.get("/historico")
async def list_history(
    exercicio_id: Optional[int] = None,
    email: Optional[str] = None,
    db: Database = Depends(get_db),
    resolver: IdentityResolver = Depends(get_resolver),
    mapper: ResponseMapperV1 = Depends(get_mapper),
):
    owner = await resolver.resolve(email)
    if exercicio_id is not None:
        entries = await db.run_without_commit(lambda s: history.list_for_exercise(s, exercicio_id, owner))
        return [mapper.history_entry(entry) for entry in entries]

    # calendar / heatmap view across every routine of the user
    if owner is None:
        return []
    rows = await db.run_without_commit(lambda s: history.list_for_user(s, owner))
    return [mapper.history_entry(entry, name) for entry, name in rows]


@router.post("/historico")
async def append_history(
    body: HistoryIn,
    email: Optional[str] = None,
    db: Database = Depends(get_db),
    resolver: IdentityResolver = Depends(get_resolver),
    mapper: ResponseMapperV1 = Depends(get_mapper),
):
    owner = await resolver.resolve(email)
    entry_id = await db.run(
        lambda s: history.append_entry(
            s, body.routine_exercise_id, body.weight, body.reps, body.set_type, body.recorded_at, owner
        )
    )
    return mapper.ok(id=entry_id)
