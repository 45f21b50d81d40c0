"""
MiniCRM Backend — Database Session Management
===============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   Creates one async engine per process, provides a session dependency
       that auto-commits on success and auto-rolls-back on error.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created at module import; sessions are created per-request.

Connection Pooling:
    PostgreSQL (asyncpg):  pool_size / max_overflow / pre_ping from settings,
                           connections recycled hourly.
    SQLite (aiosqlite):    SQLAlchemy picks the pool class itself; sizing
                           arguments are rejected by the SQLite pools, so
                           none are passed.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from minicrm.config import settings


def engine_options() -> Dict[str, Any]:
    """Keyword arguments for create_async_engine, based on the configured URL."""
    options: Dict[str, Any] = {
        # Echo SQL queries in DEBUG mode for development visibility
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
# The single store handle shared by every request in this process
engine = create_async_engine(settings.database_url, **engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay readable after the request commits
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models (shared metadata)."""
    pass


# ── Key Range ─────────────────────────────────────────────────────────────
# Largest value an INTEGER key column holds: SQLite integers are 64-bit,
# PostgreSQL INTEGER is 32-bit. Path ids above it cannot name a row.
MAX_STORE_ID = 2**63 - 1 if settings.is_sqlite else 2**31 - 1


def is_storable_id(value: int) -> bool:
    return 0 <= value <= MAX_STORE_ID


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler (the handler performs queries)
        3. On success: commits the transaction
        4. On error: rolls back the transaction
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/companies")
        async def list_companies(db: AsyncSession = Depends(get_db_session)):
            return await company_service.list_companies(db)

    Raises:
        Any exception from the handler is re-raised after rollback so the
        global error handlers can build the response.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """Closes all pooled connections. Called during application shutdown."""
    await engine.dispose()
