from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from .config import Settings, get_settings
from .db import Database, create_database
from .errors import DiarioError, ErrorKind, InvalidInputError
from .responses import get_mapper
from .routers import auth, bodyweight, history, library, routine_exercises, routines
from .security import PasswordHasher

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.INVALID_CREDENTIALS: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.DUPLICATE_ENTRY: 409,
    ErrorKind.STORE_UNAVAILABLE: 503,
}


def _register_exception_handlers(app: FastAPI) -> None:
    async def diario_error_handler(request: Request, exc: DiarioError) -> JSONResponse:
        mapper = request.app.state.mapper
        return JSONResponse(status_code=STATUS_BY_KIND[exc.kind], content=mapper.error(exc.kind.value, exc.message))

    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return await diario_error_handler(request, InvalidInputError())

    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        mapper = request.app.state.mapper
        return JSONResponse(status_code=500, content=mapper.error("internal_error", "Erro no servidor."))

    app.add_exception_handler(DiarioError, diario_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    app_settings = settings or get_settings()
    db = database or create_database(app_settings)

    app = FastAPI(title="Diário de Carga")
    app.state.settings = app_settings
    app.state.db = db
    app.state.hasher = PasswordHasher(rounds=app_settings.bcrypt_rounds)
    app.state.mapper = get_mapper(app_settings.response_format)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("Recebido: %s %s", request.method, request.url.path)
        return await call_next(request)

    app.add_middleware(
        SessionMiddleware,
        secret_key=app_settings.secret_key,
        max_age=app_settings.session_max_age,
        same_site="lax",
        https_only=False,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(routines.router)
    app.include_router(routine_exercises.router)
    app.include_router(history.router)
    app.include_router(bodyweight.router)
    app.include_router(library.router)
    return app
