"""Database Session Manager — lazily initialized async engine with rollback and health checks.

Invariants:
    - The engine is created at most once per manager (first caller wins, guarded by asyncio.Lock)
    - A created engine is never rotated or replaced for the manager's lifetime
    - A failed first connection leaves the manager uninitialized and raises StoreUnavailableError
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy / driver exceptions and raw socket errors (OSError) mapped
      to StoreUnavailableError (core/errors.py)

Design Decisions:
    - Manager is an owned handle passed into SqlPledgeStore at construction,
      instead of a module-level cached client reused implicitly by handlers
    - Lazy init: the process starts even when the database is down; readiness
      probe reports it and the first request surfaces StoreUnavailableError
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

from pledgewall.core.errors import StoreUnavailableError
from pledgewall.db.base import Base
from pledgewall import models  # noqa: F401  (populate Base.metadata)

logger = logging.getLogger(__name__)


def engine_options(
    database_url: str, pool_size: int = 20, max_overflow: int = 10,
) -> dict[str, Any]:
    """Pool options per dialect — SQLite pools reject size/overflow arguments."""
    if database_url.startswith("sqlite"):
        return {}
    return {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


class DatabaseSessionManager:
    """Owns one lazily created async engine and hands out sessions."""

    def __init__(self, database_url: str, **options: Any):
        self.database_url = database_url
        self._options = options
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None
        self._init_lock = asyncio.Lock()

    @property
    def initialized(self) -> bool:
        return self._engine is not None

    async def get_engine(self) -> AsyncEngine:
        """Return the engine, creating and probing it on first use."""
        if self._engine is not None:
            return self._engine
        async with self._init_lock:
            # Another waiter may have finished setup while we queued on the lock
            if self._engine is None:
                self._engine = await self._connect()
                self._session_factory = async_sessionmaker(
                    self._engine,
                    class_=AsyncSession,
                    expire_on_commit=False,
                )
                logger.info("Database engine initialized")
        return self._engine

    async def _connect(self) -> AsyncEngine:
        engine = create_async_engine(self.database_url, **self._options)
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            await engine.dispose()
            logger.error(f"DB connection failed: {e}")
            raise StoreUnavailableError("connect", str(e)) from e
        return engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        await self.get_engine()
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise StoreUnavailableError("commit", "Integrity constraint violated") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise StoreUnavailableError("execute", "Connection or operational error") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise StoreUnavailableError("query", "Database driver error") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise StoreUnavailableError("unknown", "Database operation failed") from e
        except OSError as e:
            await session.rollback()
            logger.error(f"DB connection lost: {e}")
            raise StoreUnavailableError("connect", str(e)) from e
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create all tables (dev/test convenience — production uses alembic)."""
        engine = await self.get_engine()
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

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
        if self._engine is not None:
            await self._engine.dispose()
