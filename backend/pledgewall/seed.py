"""Seed Pledges — insert sample pledges through the validator and the configured store.

Usage:
    python -m pledgewall.seed

Invariants:
    - Samples go through validate_pledge like any submission (no direct row inserts)
    - Existing pledges are never cleared (stores are append-only)
"""

import asyncio
import logging

from pledgewall.config import get_settings
from pledgewall.core.taxonomy import get_taxonomy
from pledgewall.infrastructure.observability import setup_logging
from pledgewall.infrastructure.pledge_store_factory import build_pledge_store
from pledgewall.infrastructure.sql_pledge_store import SqlPledgeStore
from pledgewall.services.pledge_service import submit_pledge

logger = logging.getLogger(__name__)

SAMPLE_PLEDGES = [
    {
        "name": "Janice Fernandes", "email": "janice@example.com",
        "mobile": "1234567890", "state": "Maharashtra",
        "profileType": "Working Professional",
        "commitments": ["Energy", "Transportation"],
    },
    {
        "name": "Amit Singh", "email": "amit@example.com",
        "mobile": "8765432109", "state": "Uttar Pradesh",
        "profileType": "Student",
        "commitments": ["Transportation"],
    },
    {
        "name": "Diya Gupta", "email": "diya@example.com",
        "mobile": "7654321098", "state": "Karnataka",
        "profileType": "Workshops",
        "commitments": ["Energy", "Transportation", "Consumption"],
    },
]


async def seed() -> int:
    settings = get_settings()
    taxonomy = get_taxonomy(settings.taxonomy_version)
    store = build_pledge_store(settings)
    try:
        if settings.auto_create_schema and isinstance(store, SqlPledgeStore):
            await store.db_manager.create_schema()
        for raw in SAMPLE_PLEDGES:
            await submit_pledge(store, raw, taxonomy)
        total = await store.count_all()
    finally:
        if isinstance(store, SqlPledgeStore):
            await store.db_manager.dispose()
    logger.info(f"Seeded {len(SAMPLE_PLEDGES)} pledges ({total} total)")
    return total


if __name__ == "__main__":
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    asyncio.run(seed())
