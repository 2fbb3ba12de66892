"""
Employee API: Database Engine & Session Management
=====================================================

What:  Async SQLAlchemy engine construction, session factory, ORM base class,
       and the per-request session dependency.
How:   `build_engine()` creates an async engine with connection pooling from
       Settings. The application factory stores the engine and its session
       factory on `app.state`; `get_db_session` opens one session per request
       from there and rolls back on error.
Who:   The application factory (main.py), route dependencies, the health check.

Connection Pooling:
    pool_size / max_overflow:  From settings (PostgreSQL only)
    pool_pre_ping:             Validates connections before use
    pool_recycle=3600:         Recycles connections every hour

    SQLite (aiosqlite) keeps SQLAlchemy's default pool for the dialect; the
    sizing arguments are not passed there.
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from employee_api.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models inherit from this class to register with a shared metadata
    object, which `create_tables()` uses to create the schema on startup.
    """
    pass


# ── Engine Construction ───────────────────────────────────────────────────
def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for the configured backend.

    Echoes SQL when LOG_LEVEL is DEBUG.
    """
    kwargs = {
        "echo": settings.log_level == "DEBUG",
        "pool_pre_ping": settings.db_pool_pre_ping,
    }
    if not settings.is_sqlite:
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=3600,
        )
    return create_async_engine(settings.database_url, **kwargs)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: attributes stay readable after the commit in
    # get_db_session, when the session is already closed
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Opens a session from the factory stored on `app.state`
        2. Yields it to the route (the Store issues statements on it)
        3. On success: commits anything still pending. EmployeeStore commits
           its own writes, so a failed write commit is reported before the
           response; this commit only closes read transactions
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/")
        async def list_employees(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables(engine: AsyncEngine) -> None:
    """
    Create every table registered on Base.metadata that does not exist yet.

    Not a migration tool: existing tables are left untouched.
    """
    # Import registers the model on Base.metadata
    from employee_api.models.employee import Employee  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine(engine: AsyncEngine) -> None:
    """Closes all pooled connections. Called during application shutdown."""
    await engine.dispose()
