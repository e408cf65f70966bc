"""
Database session management.

WHY: Async database sessions are required for FastAPI's async/await pattern.
Using a context manager ensures proper connection cleanup and transaction management.
"""

import logging
from typing import Any, AsyncGenerator, Dict

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from inventory.core.config import settings
from inventory.models.base import Base

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(sync_engine: Engine) -> None:
    """
    Turn on foreign key enforcement for every new SQLite connection.

    WHY: SQLite ignores REFERENCES clauses unless the pragma is set per
    connection. The products -> categories foreign key is the authoritative
    referential-integrity guard, so it has to be enforced.

    Args:
        sync_engine: The sync engine behind an AsyncEngine
    """

    @event.listens_for(sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _engine_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}
    # WHY: pool sizing only applies to server databases; SQLite file
    # connections are cheap and :memory: uses a static pool.
    if not settings.is_sqlite:
        options.update(pool_size=10, max_overflow=20)
    return options


# Create async engine
engine: AsyncEngine = create_async_engine(settings.async_database_url, **_engine_options())
if settings.is_sqlite:
    enable_sqlite_foreign_keys(engine.sync_engine)

# Create session factory
# WHY: expire_on_commit=False prevents lazy-loading issues after commit.
# autoflush=False gives explicit control over when writes hit the database.
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get database session.

    WHY: FastAPI dependency injection ensures each request gets its own
    database session. The request's writes are committed when the handler
    returns and rolled back if it raises.

    Yields:
        AsyncSession: Database session for the request
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_models(bind: AsyncEngine = engine) -> None:
    """
    Create any missing tables.

    WHY: Lets the service boot against an empty database without running
    alembic first. Existing tables are left untouched.

    Args:
        bind: Engine to create the tables on
    """
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")
