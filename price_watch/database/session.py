"""SQLAlchemy database session management.

Handlers never touch the engine directly: they receive a session through
the ``get_db`` dependency, which tests override with an in-memory
database.
"""

import logging
from typing import Generator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from price_watch.config import settings

logger = logging.getLogger(__name__)

# SQLAlchemy declarative base for ORM models
Base = declarative_base()

# Created on first request so importing the app never opens the database
_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """Enforce the snapshot -> item foreign key on SQLite connections."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str) -> Engine:
    """Create an engine for a SQLite database URL.

    Args:
        database_url: SQLAlchemy URL of the database

    Returns:
        Engine usable from FastAPI's worker threads
    """
    return create_engine(
        database_url,
        connect_args={"check_same_thread": False},
        pool_pre_ping=True,
        echo=settings.debug,
    )


def init_engine() -> Engine:
    """Return the application engine, creating it on first use.

    Creates the parent directory of the configured database file.
    """
    global _engine

    if _engine is None:
        settings.get_database_path().parent.mkdir(parents=True, exist_ok=True)
        _engine = build_engine(settings.database_url)
        logger.info(f"Database engine initialized: {settings.database_url}")

    return _engine


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding one session per request.

    Yields:
        SQLAlchemy database session, closed after the request
    """
    global _SessionLocal

    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=init_engine())

    db = _SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(engine: Engine) -> None:
    """Create the watch item and snapshot tables on ``engine``.

    Fresh databases only; existing ones are upgraded with Alembic.
    """
    # Register models with Base before creating tables
    from price_watch.database import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")


def check_database_connection(db: Session) -> bool:
    """Check that ``db`` can reach its database.

    Returns:
        True if a trivial query succeeds, False otherwise
    """
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection check failed: {e}")
        return False
