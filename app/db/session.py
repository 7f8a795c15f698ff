"""Database session management."""

from __future__ import annotations

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings
from app.db.base import Base


def build_engine(database_url: str) -> Engine:
    """Create an engine; SQLite connections get foreign keys and WAL turned on."""
    is_sqlite = database_url.startswith("sqlite")
    new_engine = create_engine(
        database_url,
        pool_pre_ping=True,
        echo=settings.debug,
        connect_args={"check_same_thread": False} if is_sqlite else {},
    )

    if is_sqlite:

        @event.listens_for(new_engine, "connect")
        def _set_sqlite_pragmas(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys = ON")
            cursor.execute("PRAGMA journal_mode = WAL")
            cursor.close()

    return new_engine


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine | None = None) -> None:
    """Create any missing tables."""
    import app.models  # noqa: F401 - register models on Base.metadata

    Base.metadata.create_all(bind=bind or engine)


def get_db():
    """Dependency for FastAPI to get DB session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
