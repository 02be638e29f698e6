"""Root conftest — shared test configuration and store fixtures.

Invariants:
    - Tests never reach a real database or write a real local store file
    - Every test gets a fresh in-memory SQLite database
    - The store clock is strictly increasing so newest-first ordering is deterministic

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares the single connection,
      so tables created by create_schema() are visible to the store
      (ADR: PostgreSQL-specific features not exercised here)
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("STORE_BACKEND", "sql")
os.environ.setdefault("LOCAL_STORE_PATH", "")

import pytest  # noqa: E402

from pledgewall.core.taxonomy import TAXONOMY_V1  # noqa: E402
from pledgewall.infrastructure.sql_pledge_store import SqlPledgeStore  # noqa: E402
from tests.support import TickingClock, memory_db_manager  # noqa: E402


@pytest.fixture
async def db_manager():
    manager = memory_db_manager()
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
async def sql_store(db_manager, clock):
    return SqlPledgeStore(db_manager, clock=clock)


@pytest.fixture
def taxonomy():
    return TAXONOMY_V1
