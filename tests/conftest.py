# tests/conftest.py
from __future__ import annotations

from collections.abc import Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from footprint_api.core.security import create_access_token
from footprint_api.db.session import Base
from footprint_api.db.session import get_db as app_get_session
from footprint_api.main import app as fastapi_app
from footprint_api.models import SerialCounter
from footprint_api.services.draft_cache import DraftCache, MemoryDraftStorage
from footprint_api.services.serial_allocator import Allocation, allocate, ensure_serial_counter

TEST_DB_URL = "sqlite://"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enforce_foreign_keys(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        # Service commits release a savepoint; the outer transaction stays open.
        join_transaction_mode="create_savepoint",
    )
    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Services commit, so wipe every table between tests.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def serial_counter(db_session: Session) -> SerialCounter:
    """Ensure the atomic counter row exists, starting before the first serial."""
    return ensure_serial_counter(db_session)


@pytest.fixture()
def owner(db_session: Session, serial_counter: SerialCounter) -> Allocation:
    """Register the primary test identity with its default page."""
    return allocate(db_session, "owner@example.com")


@pytest.fixture()
def stranger(db_session: Session, owner: Allocation) -> Allocation:
    """Register a second identity after ``owner``."""
    return allocate(db_session, "stranger@example.com")


@pytest.fixture()
def auth_headers(owner: Allocation) -> dict[str, str]:
    """Return authorization headers for the primary test identity."""
    token = create_access_token(owner.user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def stranger_headers(stranger: Allocation) -> dict[str, str]:
    """Return authorization headers for the second identity."""
    token = create_access_token(stranger.user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def drafts() -> DraftCache:
    return DraftCache(MemoryDraftStorage())
