"""
Database session management.

Provides a cached SQLAlchemy engine per database URL and a session context
manager with automatic commit/rollback.
"""

from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from core.config import get_settings
from .models import Base


@lru_cache(maxsize=None)
def _engine_for_url(url: str, echo: bool = False) -> Engine:
    """Create a singleton Engine for the given URL."""
    kwargs: dict = {"pool_pre_ping": True, "future": True, "echo": echo}
    if url.startswith("sqlite"):
        # Request threads share the engine; SQLite needs this to allow it
        kwargs["connect_args"] = {"check_same_thread": False}
    return create_engine(url, **kwargs)


def get_engine() -> Engine:
    settings = get_settings()
    return _engine_for_url(settings.database.sqlalchemy_url(), settings.database.echo)


def get_sessionmaker() -> sessionmaker[Session]:
    return sessionmaker(
        bind=get_engine(),
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        future=True,
    )


@contextmanager
def get_session() -> Iterator[Session]:
    """Get a database session with automatic commit/rollback.

    Usage:
        with get_session() as session:
            session.add(model)
    """
    SessionLocal = get_sessionmaker()
    session: Session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db() -> None:
    """Create all tables from the ORM metadata.

    Meant for development and tests; deployments run the Alembic migrations.
    """
    Base.metadata.create_all(bind=get_engine())


def reset_engine() -> None:
    """Drop cached engines (tests switch DATABASE_URL between cases)."""
    _engine_for_url.cache_clear()


def check_connection() -> bool:
    try:
        with get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
