"""
Resource API - Database Connection Management
===============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   A `Database` object owns the engine (and its connection pool) and hands
       out sessions that commit on success and roll back on error.
Who:   Constructed once by the application lifespan and stored on
       `app.state.database`; route handlers receive sessions via
       `Depends(get_db_session)`.
When:  Engine is created at startup; sessions are created per request.

Lifecycle:
    startup   → Database(url) → verify_connection() (SELECT 1, fatal on failure)
    request   → session() acquired from the pool, released on every exit path
    shutdown  → dispose() closes all pooled connections

Connection Pooling:
    pool_size / max_overflow / pool_pre_ping come from settings and only apply
    to server databases. SQLite (tests, local development) uses SQLAlchemy's
    default pool and gets PRAGMA foreign_keys=ON so constraint behaviour
    matches PostgreSQL.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from resource_api.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Holds the engine and session factory for the process lifetime.

    Attributes:
        engine:          AsyncEngine managing the connection pool
        session_factory: async_sessionmaker producing AsyncSession objects
    """

    def __init__(
        self,
        url: str,
        pool_size: int = 10,
        max_overflow: int = 10,
        pool_pre_ping: bool = True,
        echo: bool = False,
    ):
        self.url = url
        self.backend = make_url(url).get_backend_name()

        engine_kwargs = {"echo": echo}
        # Why only for servers: SQLite's default pool does not accept
        # pool_size/max_overflow, and a file database has no idle timeout.
        # pool_pre_ping replaces connections the server dropped while idle;
        # pool_recycle=3600 retires them before common proxy timeouts.
        if self.backend != "sqlite":
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=pool_pre_ping,
                pool_recycle=3600,
            )

        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)

        # SQLite ignores FOREIGN KEY clauses unless asked per connection; without
        # this a comment on a missing resource would be stored instead of 400.
        if self.backend == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        # expire_on_commit=False: rows stay readable after commit (response building)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.sqlalchemy_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            echo=settings.log_level == "DEBUG",
        )

    async def verify_connection(self) -> None:
        """
        Open one connection and run SELECT 1.

        Raises whatever the driver raises (OSError, asyncpg errors wrapped in
        sqlalchemy.exc.OperationalError, ...). Not retried.
        """
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_all(self) -> None:
        """Create every declared table that does not exist yet."""
        # Model modules must be imported so their tables register on Base.metadata
        import resource_api.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Scoped session: commit on success, rollback on error, always close.

        Example:
            async with database.session() as db:
                await db.execute(select(Resource))
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database connection pool closed (%s)", self.backend)


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    The Database instance is taken from `request.app.state.database`, which
    the lifespan handler (or a test fixture) installs. Exceptions raised by
    the handler propagate through here, roll the session back, and reach the
    global exception handlers.

    Why writes commit in the service, not here:
        This teardown may run after the response has been sent. A COMMIT
        that failed at that point could no longer change the status, so the
        client would see 200 for a lost write. Each writing service method
        commits inside `translate_db_errors` instead; by the time this
        teardown commits, the transaction is already finished or was read-only.
    """
    database: Optional[Database] = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database is not initialised on app.state")

    async with database.session() as session:
        yield session
