"""Shared test fixtures."""
import os
import uuid
from typing import Generator

# Settings are read at import time; provide the required values first
os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789-abcdefghijklmnop")
os.environ.setdefault("DATABASE_PASSWORD", "test-password")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Import all models so SQLModel.metadata knows about them
from app.db import base  # noqa: F401
from app.core.security import create_access_token
from app.db.session import get_db
from app.main import create_auth_app, create_hydration_app


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite engine. Tables recreated fresh for each test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="test_session")
def test_session_fixture(engine) -> Generator[Session, None, None]:
    """Provides a DB session connected to in-memory SQLite."""
    with Session(engine) as session:
        yield session


def _client_for(app, engine) -> TestClient:
    def override_db():
        with Session(engine) as s:
            yield s

    app.dependency_overrides[get_db] = override_db
    return TestClient(app)


@pytest.fixture(name="auth_client")
def auth_client_fixture(engine):
    with _client_for(create_auth_app(), engine) as c:
        yield c


@pytest.fixture(name="hydration_client")
def hydration_client_fixture(engine):
    with _client_for(create_hydration_app(), engine) as c:
        yield c


@pytest.fixture(name="user_id")
def user_id_fixture() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture(name="auth_headers")
def auth_headers_fixture(user_id) -> dict[str, str]:
    """Bearer header for a freshly minted token of ``user_id``."""
    token = create_access_token(user_id=str(user_id), username="john_doe")
    return {"Authorization": f"Bearer {token}"}
