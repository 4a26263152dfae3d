from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from ..db import Database
from ..deps import IdentityResolver, get_db, get_mapper, get_resolver
from ..responses import ResponseMapperV1
from ..schemas import WeightIn
from ..services import bodyweight

router = APIRouter(prefix="/api", tags=["peso"])


@router.get("/peso")
async def list_weights(
    email: Optional[str] = None,
    db: Database = Depends(get_db),
    resolver: IdentityResolver = Depends(get_resolver),
    mapper: ResponseMapperV1 = Depends(get_mapper),
):
    owner = await resolver.resolve(email)
    if owner is None:
        return []
    rows = await db.run_without_commit(lambda s: bodyweight.list_weights(s, owner))
    return [mapper.weight_entry(row) for row in rows]


@router.post("/peso")
async def append_weight(
    body: WeightIn,
    db: Database = Depends(get_db),
    resolver: IdentityResolver = Depends(get_resolver),
    mapper: ResponseMapperV1 = Depends(get_mapper),
):
    owner = await resolver.require(body.user_email)
    entry_id = await db.run(lambda s: bodyweight.append_weight(s, owner, body.weight, body.recorded_at))
    return mapper.ok(id=entry_id)
