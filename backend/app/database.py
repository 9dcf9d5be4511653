"""
Community Board Backend — Database Session Management
=======================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   Creates an async engine with connection pooling, provides a session
       dependency that auto-commits on success and auto-rolls-back on error.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created at module import; sessions are created per-request.

Store as a dependency:
    Routes never import the engine. They receive an AsyncSession through
    Depends(get_db_session). make_session_dependency() builds the same
    commit/rollback dependency around any session factory, so tests swap in
    an isolated in-memory database with app.dependency_overrides.

Connection Pooling Strategy (server databases only):
    pool_size=20:      Persistent connections for normal load
    max_overflow=10:   Temporary connections for traffic spikes (total max = 30)
    pool_pre_ping:     Validates connections before use
    pool_recycle=3600: Recycles connections every hour
"""

import logging
from typing import Any, AsyncGenerator, Callable, Dict

from sqlalchemy import BigInteger, Integer, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings
from app.exceptions import DatabaseError

logger = logging.getLogger(__name__)


def _engine_options() -> Dict[str, Any]:
    """Engine keyword arguments for the configured database URL."""
    options: Dict[str, Any] = {
        # Echo SQL queries in DEBUG mode for development visibility
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        # SQLite picks its own pool class and rejects the sizing arguments
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


def enable_sqlite_foreign_keys(async_engine: AsyncEngine) -> None:
    """
    Turn on foreign key enforcement for every new SQLite connection.

    SQLite ignores REFERENCES clauses (and ON DELETE CASCADE) unless the
    pragma is set per connection.
    """

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())
if settings.is_sqlite:
    enable_sqlite_foreign_keys(engine)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: response mapping reads attributes after commit
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Identity Columns ──────────────────────────────────────────────────────
# 64-bit keys; SQLite only aliases rowid (and allows AUTOINCREMENT) for the
# exact type name INTEGER, which is 64-bit there anyway
IdentityType = BigInteger().with_variant(Integer(), "sqlite")

# Largest id a BIGINT column can hold; anything above was never issued
MAX_IDENTITY = 2**63 - 1


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object used by Alembic and by create_all().
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
def make_session_dependency(
    session_factory: async_sessionmaker,
) -> Callable[[], AsyncGenerator[AsyncSession, None]]:
    """
    Build a FastAPI dependency that provides one session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler (the handler performs queries)
        3. On success: commits the transaction; a failed commit becomes
           DatabaseError (→ 500)
        4. On error: rolls back the transaction and re-raises
        5. Always: closes the session (returns connection to pool)

    Routes declare it with scope="function", so the commit runs before the
    response is sent and a client never sees success for a lost write.

    Every mutating request therefore commits all of its reads and writes,
    or none of them.
    """

    async def session_dependency() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                # Roll back for ANY failure, including non-DB errors raised
                # after a flush (e.g. a NotFoundError on a later lookup)
                await session.rollback()
                raise

            try:
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error("Commit failed: %s", str(e))
                raise DatabaseError(
                    message="Could not save changes. Please try again.",
                    context={"error_type": type(e).__name__},
                ) from e

    return session_dependency


get_db_session = make_session_dependency(async_session_factory)


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables(async_engine: AsyncEngine = engine) -> None:
    """Create all tables known to Base.metadata (no-op for existing ones)."""
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
