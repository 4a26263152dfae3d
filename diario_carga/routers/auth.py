from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from ..db import Database
from ..deps import SessionHandle, get_db, get_hasher, get_mapper, get_session
from ..responses import ResponseMapperV1
from ..schemas import LoginIn, RegisterIn
from ..security import PasswordHasher
from ..services import users

router = APIRouter(prefix="/api", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/login")
async def login(
    body: LoginIn,
    db: Database = Depends(get_db),
    hasher: PasswordHasher = Depends(get_hasher),
    session: SessionHandle = Depends(get_session),
    mapper: ResponseMapperV1 = Depends(get_mapper),
):
    user = await db.run_without_commit(lambda s: users.authenticate(s, hasher, body.email, body.secret))
    session.bind(user.id, user.name)
    logger.info("User %s logged in", user.id)
    return mapper.login(user)


@router.post("/cadastro")
async def register(
    body: RegisterIn,
    db: Database = Depends(get_db),
    hasher: PasswordHasher = Depends(get_hasher),
    mapper: ResponseMapperV1 = Depends(get_mapper),
):
    await db.run(lambda s: users.register(s, hasher, body.name, body.email, body.secret))
    return mapper.ok(message="Cadastro realizado!")


@router.api_route("/logout", methods=["GET", "POST"])
async def logout(
    session: SessionHandle = Depends(get_session),
    mapper: ResponseMapperV1 = Depends(get_mapper),
):
    session.clear()
    return mapper.ok()
