"""Pledge Store Factory — builds the configured PledgeStore and exposes it to routes.

Invariants:
    - Exactly one store per process, set by init_store() during lifespan startup
    - get_pledge_store() raises RuntimeError before init (programming error, not a 5xx to hide)

Design Decisions:
    - Singleton + FastAPI dependency, mirroring init_db/get_db: tests swap it via
      app.dependency_overrides without touching settings
    - The SQL backend receives its DatabaseSessionManager explicitly; the store never
      reaches for a module-level connection
"""

import logging

from pledgewall.config import Settings
from pledgewall.core.domain_types import StoreBackend
from pledgewall.core.repository_protocols import PledgeStore
from pledgewall.infrastructure.database import DatabaseSessionManager, engine_options
from pledgewall.infrastructure.local_pledge_store import LocalPledgeStore
from pledgewall.infrastructure.sql_pledge_store import SqlPledgeStore

logger = logging.getLogger(__name__)


def build_pledge_store(settings: Settings) -> PledgeStore:
    """Construct the backend selected by settings.store_backend."""
    if settings.store_backend == StoreBackend.LOCAL:
        return LocalPledgeStore(settings.local_store_path)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        **engine_options(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        ),
    )
    return SqlPledgeStore(db_manager)


# Singleton (initialized on startup)
pledge_store: PledgeStore | None = None


def init_store(settings: Settings) -> PledgeStore:
    global pledge_store
    pledge_store = build_pledge_store(settings)
    logger.info(
        "Pledge store configured",
        extra={"backend": pledge_store.backend_name},
    )
    return pledge_store


async def get_pledge_store() -> PledgeStore:
    """FastAPI dependency for the pledge store."""
    if pledge_store is None:
        raise RuntimeError("Pledge store not initialized")
    return pledge_store
