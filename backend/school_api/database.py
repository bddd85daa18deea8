"""
School Records API: Database Handle
=====================================

What:  Async SQLAlchemy engine, session factory and declarative base.
Why:   Centralizes all database connection logic in one place.
How:   `Database` owns one async engine (with its connection pool) and a
       session factory. The app factory builds exactly one and hands it to
       every repository at construction time; nothing here is a module-level
       singleton.
Who:   Built by create_app(); used by repositories and the health check.
When:  Engine is created with the app; sessions are opened per store call.

Connection Pooling (server databases only):
    pool_size=20, max_overflow=10, pool_pre_ping, pool_recycle=3600.
    SQLite URLs fall back to SQLAlchemy's default pool for the driver.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from school_api.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, used both by create_all() on startup
    and by Alembic for migrations.
    """
    pass


class Database:
    """
    Explicit store handle: one engine, one session factory.

    expire_on_commit=False keeps attribute values loaded after commit so
    repositories can return ORM objects to the API layer after the session
    is closed.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        config: Optional[Settings] = None,
        engine: Optional[AsyncEngine] = None,
    ):
        config = config or default_settings
        self.url = url or config.database_url
        if engine is None:
            engine = create_async_engine(self.url, **config.engine_options())
        self.engine: AsyncEngine = engine
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Open a session for a single store operation.

        On error the transaction is rolled back and the exception re-raised;
        callers commit explicitly. The session is always closed.
        """
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def create_tables(self) -> None:
        """
        Create every mapped table that does not exist yet.

        The only schema management done at runtime; column changes need an
        Alembic revision.
        """
        # Registers the model classes with Base.metadata
        from school_api import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured: %s", ", ".join(sorted(Base.metadata.tables)))

    async def ping(self) -> bool:
        """Run SELECT 1; returns False instead of raising when unreachable."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False

    async def dispose(self) -> None:
        """Close all pooled connections (called on application shutdown)."""
        await self.engine.dispose()
