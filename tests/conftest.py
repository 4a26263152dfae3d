from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from diario_carga.config import Settings
from diario_carga.db import create_database
from diario_carga.main import create_app
from diario_carga.models import User
from diario_carga.security import PasswordHasher


@pytest.fixture
def settings() -> Settings:
    return Settings(
        database_url="sqlite+pysqlite:///:memory:",
        secret_key="test-secret",
        bcrypt_rounds=4,
    )


@pytest.fixture
def database(settings):
    db = create_database(settings)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    with database.session() as db_session:
        yield db_session


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def make_user(session, hasher):
    def _make(name: str = "Ana", email: str = "ana@x.com", secret: str = "s1") -> User:
        user = User(name=name, email=email, credential_digest=hasher.hash(secret))
        session.add(user)
        session.flush()
        return user

    return _make


@pytest.fixture
def client(settings, database):
    app = create_app(settings, database)
    with TestClient(app) as test_client:
        yield test_client
