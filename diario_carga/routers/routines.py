from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from ..db import Database
from ..deps import IdentityResolver, get_db, get_mapper, get_resolver
from ..responses import ResponseMapperV1
from ..schemas import RoutineIn
from ..services import routines

router = APIRouter(prefix="/api", tags=["fichas"])


@router.get("/fichas")
async def list_routines(
    email: Optional[str] = None,
    db: Database = Depends(get_db),
    resolver: IdentityResolver = Depends(get_resolver),
    mapper: ResponseMapperV1 = Depends(get_mapper),
):
    owner = await resolver.resolve(email)
    if owner is None:
        return []
    rows = await db.run_without_commit(lambda s: routines.list_routines(s, owner))
    return [mapper.routine(row) for row in rows]


@router.post("/fichas")
async def create_routine(
    body: RoutineIn,
    db: Database = Depends(get_db),
    resolver: IdentityResolver = Depends(get_resolver),
    mapper: ResponseMapperV1 = Depends(get_mapper),
):
    owner = await resolver.require(body.user_email)
    routine_id = await db.run(lambda s: routines.create_routine(s, owner, body.name, body.weekday_label))
    return mapper.ok(id=routine_id)


@router.delete("/fichas/{routine_id}")
async def delete_routine(
    routine_id: int,
    email: Optional[str] = None,
    db: Database = Depends(get_db),
    resolver: IdentityResolver = Depends(get_resolver),
    mapper: ResponseMapperV1 = Depends(get_mapper),
):
    owner = await resolver.resolve(email)
    await db.run(lambda s: routines.delete_routine(s, routine_id, owner))
    return mapper.ok()
