from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import InterfaceError, OperationalError, TimeoutError as PoolTimeoutError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import Settings
from .errors import StoreUnavailableError

logger = logging.getLogger(__name__)

_UNAVAILABLE = (OperationalError, InterfaceError, PoolTimeoutError)


class Base(DeclarativeBase):
    """Declarative base for ORM models."""


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(settings: Settings) -> Engine:
    """Build the process-wide engine with a bounded connection pool."""
    url = settings.database_url
    if url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url.rstrip("/").endswith("sqlite:"):
            # one shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool
        else:
            kwargs.update(pool_size=settings.db_pool_size, max_overflow=0, pool_timeout=settings.db_pool_timeout)
        engine = create_engine(url, future=True, echo=False, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine
    return create_engine(
        url,
        future=True,
        echo=False,
        pool_size=settings.db_pool_size,
        max_overflow=0,
        pool_timeout=settings.db_pool_timeout,
        pool_pre_ping=True,
    )


class Database:
    """Helper wrapper to run blocking ORM calls in a thread pool.

    Each call is one logical operation: one session, one transaction,
    connection returned to the pool when the call ends.
    """

    def __init__(self, session_factory: Callable[[], Session], engine: Optional[Engine] = None):
        self._session_factory = session_factory
        self.engine = engine

    def _run_sync(self, func: Callable[[Session], Any]) -> Any:
        with self._session_factory() as session:
            try:
                result = func(session)
                session.commit()
                return result
            except _UNAVAILABLE as exc:
                session.rollback()
                logger.exception("Store unavailable")
                raise StoreUnavailableError() from exc
            except Exception:
                session.rollback()
                raise

    def session(self) -> Session:
        return self._session_factory()

    def run_sync(self, func: Callable[[Session], Any]) -> Any:
        """Blocking variant of ``run`` for scripts."""
        return self._run_sync(func)

    async def run(self, func: Callable[[Session], Any]) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._run_sync, func)

    def _execute_no_commit(self, func: Callable[[Session], Any]) -> Any:
        with self._session_factory() as session:
            try:
                return func(session)
            except _UNAVAILABLE as exc:
                logger.exception("Store unavailable")
                raise StoreUnavailableError() from exc

    async def run_without_commit(self, func: Callable[[Session], Any]) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._execute_no_commit, func)

    def create_all(self) -> None:
        from . import models  # noqa: F401

        Base.metadata.create_all(self.engine)

    def dispose(self) -> None:
        if self.engine is not None:
            self.engine.dispose()


def create_database(settings: Settings) -> Database:
    engine = create_db_engine(settings)
    session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, class_=Session)
    return Database(session_factory, engine)
