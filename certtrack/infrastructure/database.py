"""Database Session Manager — async engine, per-request sessions, health check.

Invariants:
    - Every session rolls back on exception (no half-flushed state leaks)
    - Connection pool uses pool_pre_ping for stale connection detection
    - One manager per process, owned by the application (app.state.db),
      built in the lifespan or lazily on the first request

Design Decisions:
    - Explicit handle on app.state instead of a module global: routes receive
      sessions through get_db, the manager is passed by reference
    - expire_on_commit=False: rows stay readable after commit in async context
    - SQLite URLs skip pool sizing arguments (not supported by its pool)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from certtrack.config import Settings, get_settings

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages the async engine and hands out sessions."""

    def __init__(
        self, database_url: str, pool_size: int = 5, max_overflow: int = 5,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a session; roll back if the caller raises."""
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


def build_db_manager(settings: Settings) -> DatabaseSessionManager:
    return DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )


def get_db_manager(request: Request) -> DatabaseSessionManager:
    """FastAPI dependency for the process-wide manager.

    Normally set by the lifespan. Serverless runtimes that skip lifespan
    events get it created on first use and reused for the life of the process.
    """
    state = request.app.state
    if getattr(state, "db", None) is None:
        settings = getattr(state, "settings", None) or get_settings()
        state.db = build_db_manager(settings)
        logger.info("Database session manager created on first request")
    return state.db


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with get_db_manager(request).session() as session:
        yield session
