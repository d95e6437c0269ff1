"""Pytest fixtures for Price Watch server tests.

This module provides test fixtures for database sessions, test clients,
and other common test utilities.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from price_watch.config import settings
from price_watch.database.session import Base, get_db
from price_watch.main import app

# Import all models to ensure they're registered with Base
from price_watch.database.models import PriceSnapshot, WatchItem  # noqa: F401

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


def auth_headers(user_id: str) -> dict:
    """Headers the identity proxy would send for ``user_id``."""
    return {settings.user_header: user_id}


@pytest.fixture(scope="function")
def test_db() -> Generator[Session, None, None]:
    """Create a test database session.

    Creates an in-memory SQLite database for testing that is
    destroyed after each test function completes.

    Yields:
        SQLAlchemy session for testing
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,  # Keep connection alive for in-memory database
    )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(test_db: Session) -> Generator[TestClient, None, None]:
    """Create a test client signed in as ``USER_ID``.

    Uses the test database instead of the real database. Pass
    ``headers=auth_headers(OTHER_USER_ID)`` on a request to act as
    another user.
    """

    def override_get_db():
        """Override database dependency with test database."""
        yield test_db

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        test_client.headers.update(auth_headers(USER_ID))
        yield test_client

    test_db.rollback()
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db_access() -> list:
    """Records every database session handed out to a request."""
    return []


@pytest.fixture(scope="function")
def anon_client(test_db: Session, db_access: list) -> Generator[TestClient, None, None]:
    """Create a test client with no authenticated user.

    Every session request is appended to ``db_access`` so tests can
    assert that storage was never touched.
    """

    def override_get_db():
        db_access.append(test_db)
        yield test_db

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client_no_db() -> Generator[TestClient, None, None]:
    """Create a test client without database mocking.

    Useful for testing endpoints that don't need database access.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def sql_statements(test_db: Session) -> Generator[list, None, None]:
    """Records every SQL statement executed against the test database."""
    statements = []
    engine = test_db.get_bind()

    def record(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(engine, "before_cursor_execute", record)
    yield statements
    event.remove(engine, "before_cursor_execute", record)
