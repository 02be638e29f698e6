"""SQL Pledge Store — PledgeStore backed by the `pledges` table via async SQLAlchemy.

Invariants:
    - Append-only: insert is the only write; each insert is one row in one commit
    - id and created_at assigned here, never taken from the caller
    - list_recent orders by created_at DESC and never selects more than `limit` rows
    - Every persistence failure surfaces as StoreUnavailableError (via DatabaseSessionManager)

Design Decisions:
    - Clock injectable: tests get strictly increasing timestamps without sleeping
    - commitment_counts tallies in Python: JSON-array membership is dialect-specific
      and campaign-scale row counts make a single column scan acceptable
"""

import uuid
from collections import Counter
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy import func, select

from pledgewall.core.domain_types import PledgeId, StoreBackend
from pledgewall.core.pledge_records import CanonicalPledge, StoredPledge
from pledgewall.infrastructure.database import DatabaseSessionManager
from pledgewall.models.pledge import Pledge as PledgeModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _to_stored(row: PledgeModel) -> StoredPledge:
    return StoredPledge(
        id=PledgeId(row.id),
        created_at=row.created_at,
        pledge=CanonicalPledge(
            name=row.name,
            email=row.email,
            mobile=row.mobile,
            state=row.state,
            profile_type=row.profile_type,
            commitments=tuple(row.commitments or ()),
            message=row.message,
        ),
    )


class SqlPledgeStore:
    """Shared remote store — one row per pledge."""

    backend_name = StoreBackend.SQL.value

    def __init__(
        self,
        db_manager: DatabaseSessionManager,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.db_manager = db_manager
        self._clock = clock

    async def insert(self, pledge: CanonicalPledge) -> PledgeId:
        row = PledgeModel(
            id=uuid.uuid4(),
            name=pledge.name,
            email=pledge.email,
            mobile=pledge.mobile,
            state=pledge.state,
            profile_type=pledge.profile_type,
            commitments=list(pledge.commitments),
            message=pledge.message,
            created_at=self._clock(),
        )
        async with self.db_manager.session() as db:
            db.add(row)
            await db.commit()
        return PledgeId(row.id)

    async def list_recent(self, limit: int) -> list[StoredPledge]:
        if limit <= 0:
            return []
        query = (
            select(PledgeModel)
            .order_by(PledgeModel.created_at.desc())
            .limit(limit)
        )
        async with self.db_manager.session() as db:
            result = await db.execute(query)
            rows = result.scalars().all()
        return [_to_stored(r) for r in rows]

    async def count_by_profile_type(self, profile_type: str) -> int:
        query = select(func.count()).select_from(PledgeModel).where(
            PledgeModel.profile_type == profile_type,
        )
        async with self.db_manager.session() as db:
            result = await db.execute(query)
            return int(result.scalar_one())

    async def count_all(self) -> int:
        query = select(func.count()).select_from(PledgeModel)
        async with self.db_manager.session() as db:
            result = await db.execute(query)
            return int(result.scalar_one())

    async def profile_type_counts(self) -> dict[str, int]:
        query = select(
            PledgeModel.profile_type, func.count(),
        ).group_by(PledgeModel.profile_type)
        async with self.db_manager.session() as db:
            result = await db.execute(query)
            return {label: int(n) for label, n in result.all()}

    async def commitment_counts(self) -> dict[str, int]:
        async with self.db_manager.session() as db:
            result = await db.execute(select(PledgeModel.commitments))
            column = result.scalars().all()
        counts: Counter[str] = Counter()
        for commitments in column:
            counts.update(set(commitments or ()))
        return dict(counts)

    async def health_check(self) -> bool:
        return await self.db_manager.health_check()
