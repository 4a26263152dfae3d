"""Request-scoped collaborators handed to the routers through ``Depends``.

Everything is read from ``app.state`` so tests can build an application
around an in-memory database.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Request

from .db import Database
from .errors import NotFoundError
from .responses import ResponseMapperV1
from .security import PasswordHasher
from .services import identity

SESSION_USER_ID = "user_id"
SESSION_USER_NAME = "user_name"


class SessionHandle:
    """Thin view over the signed-cookie session of one request."""

    def __init__(self, request: Request) -> None:
        self._data = request.session

    @property
    def user_id(self) -> Optional[int]:
        value = self._data.get(SESSION_USER_ID)
        return int(value) if value is not None else None

    def bind(self, user_id: int, user_name: str) -> None:
        self._data[SESSION_USER_ID] = user_id
        self._data[SESSION_USER_NAME] = user_name

    def clear(self) -> None:
        self._data.clear()


class IdentityResolver:
    """Single entry point for turning a request into a canonical user id."""

    def __init__(self, db: Database, session: SessionHandle) -> None:
        self._db = db
        self._session = session

    async def resolve(self, email: Optional[str] = None) -> Optional[int]:
        session_identity = self._session.user_id
        return await self._db.run_without_commit(lambda s: identity.resolve(s, session_identity, email))

    async def require(self, email: Optional[str] = None) -> int:
        user_id = await self.resolve(email)
        if user_id is None:
            raise NotFoundError("Usuário não encontrado.")
        return user_id


def get_db(request: Request) -> Database:
    return request.app.state.db


def get_hasher(request: Request) -> PasswordHasher:
    return request.app.state.hasher


def get_mapper(request: Request) -> ResponseMapperV1:
    return request.app.state.mapper


def get_session(request: Request) -> SessionHandle:
    return SessionHandle(request)


def get_resolver(
    db: Database = Depends(get_db),
    session: SessionHandle = Depends(get_session),
) -> IdentityResolver:
    return IdentityResolver(db, session)
