"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Engine and session factory are created lazily on first use (get_db /
get_db_transactional) so import does not trigger Settings validation.

SQLite (aiosqlite) is the default store; set DATABASE_URL to a
postgresql+asyncpg:// URL for PostgreSQL. Schema is created from
Base.metadata at startup (see sweem.core.lifespan); there are no migrations.
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from sweem.core.config import get_settings
from sweem.domain.exceptions import StorageException

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: AsyncEngine | None = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def _enable_sqlite_foreign_keys(dbapi_conn: Any, connection_record: Any) -> None:
    """Turn on FK enforcement; SQLite PRAGMAs are per-connection."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_for_url(database_url: str, echo: bool = False) -> AsyncEngine:
    """Build an async engine for database_url.

    In-memory SQLite uses a StaticPool so every session shares the one
    connection that holds the database.
    """
    settings = get_settings()
    kwargs: dict[str, Any] = {"echo": echo}
    if database_url.startswith("sqlite"):
        if ":memory:" in database_url or "mode=memory" in database_url:
            kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_pre_ping"] = True
        kwargs["pool_recycle"] = 3600
        if settings.db_pool_size is not None:
            kwargs["pool_size"] = settings.db_pool_size
        if settings.db_max_overflow is not None:
            kwargs["max_overflow"] = settings.db_max_overflow
    new_engine = create_async_engine(database_url, **kwargs)
    if database_url.startswith("sqlite"):
        event.listen(new_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return new_engine


def _ensure_engine() -> None:
    """Create engine and AsyncSessionLocal on first use."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    engine = create_engine_for_url(settings.database_url, echo=settings.database_echo)
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_schema() -> None:
    """Create all tables that do not exist yet."""
    # Models register themselves on Base.metadata when imported.
    from sweem.infrastructure.persistence import models  # noqa: F401

    _ensure_engine()
    assert engine is not None
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ensured")


async def dispose_engine() -> None:
    """Close pooled connections and forget the engine (next use recreates it)."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None


async def get_db() -> AsyncIterator[AsyncSession]:
    """Database session dependency for read operations.

    Does not commit; use get_db_transactional for writes.
    Yields a session and closes it on exit.
    """
    _ensure_engine()
    assert AsyncSessionLocal is not None
    async with AsyncSessionLocal() as session:
        yield session


async def get_db_transactional() -> AsyncIterator[AsyncSession]:
    """Database session dependency for write operations.

    Begins a transaction, commits on success, rolls back on exception
    (including asyncio.CancelledError when the request is cancelled or
    times out, so a cancelled mutation is never partially applied).
    Use for POST, PUT, PATCH, DELETE endpoints.
    """
    _ensure_engine()
    assert AsyncSessionLocal is not None
    async with AsyncSessionLocal() as session:
        async with session.begin():
            yield session


async def ping(session: AsyncSession) -> None:
    """Run SELECT 1; raise StorageException if the database does not answer."""
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        raise StorageException("ping database") from e
