from __future__ import annotations

from fastapi import APIRouter, Depends

from ..db import Database
from ..deps import get_db, get_mapper
from ..responses import ResponseMapperV1
from ..services import library

router = APIRouter(prefix="/api", tags=["biblioteca"])


@router.get("/biblioteca")
async def list_library(
    db: Database = Depends(get_db),
    mapper: ResponseMapperV1 = Depends(get_mapper),
):
    rows = await db.run_without_commit(library.list_library)
    return [mapper.library_exercise(row) for row in rows]
