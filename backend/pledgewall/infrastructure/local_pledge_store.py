"""Local Pledge Store — PledgeStore over a JSON file, or purely in memory.

Invariants:
    - Documents use the persisted layout {_id, name, email, mobile, state,
      profileType, commitments, message, createdAt}
    - Append-only: documents are never rewritten, only new ones appended
    - Writes are serialized by an asyncio.Lock; the file is replaced atomically
    - File IO errors, corrupt files and malformed documents surface as
      StoreUnavailableError
    - The cache is filled once, under the lock, and never replaced afterwards

Design Decisions:
    - Same contract as SqlPledgeStore so validator and stats run unchanged
      against a single-node deployment without a database
    - path=None keeps documents in memory only (demo / mock-data mode)
    - Blocking file IO runs in a worker thread (asyncio.to_thread)
"""

import asyncio
import json
import logging
import os
import uuid
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from pledgewall.core.domain_types import PledgeId, StoreBackend
from pledgewall.core.errors import StoreUnavailableError
from pledgewall.core.pledge_records import CanonicalPledge, StoredPledge

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _from_document(doc: dict) -> StoredPledge:
    return StoredPledge(
        id=PledgeId(uuid.UUID(doc["_id"])),
        created_at=datetime.fromisoformat(doc["createdAt"]),
        pledge=CanonicalPledge(
            name=doc["name"],
            email=doc["email"],
            mobile=doc["mobile"],
            state=doc.get("state", ""),
            profile_type=doc["profileType"],
            commitments=tuple(doc.get("commitments") or ()),
            message=doc.get("message", ""),
        ),
    )


class LocalPledgeStore:
    """Single-node store — documents kept in a list, optionally mirrored to disk."""

    backend_name = StoreBackend.LOCAL.value

    def __init__(
        self,
        path: str | Path | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.path = Path(path) if path else None
        self._clock = clock
        self._lock = asyncio.Lock()
        self._documents: list[dict] | None = None

    # ─── file IO ────────────────────────────────────────────────

    def _read_file(self) -> list[dict]:
        if self.path is None or not self.path.exists():
            return []
        with self.path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, list):
            raise ValueError(f"{self.path} does not contain a JSON array")
        return data

    def _write_file(self, documents: list[dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as fh:
            json.dump(documents, fh, ensure_ascii=False)
        os.replace(tmp, self.path)

    async def _read_documents(self) -> list[dict]:
        try:
            documents = await asyncio.to_thread(self._read_file)
            for doc in documents:
                _from_document(doc)
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error(
                f"Local store load failed: {e}",
                extra={"backend": self.backend_name},
            )
            raise StoreUnavailableError("load", str(e)) from e
        return documents

    async def _load(self) -> list[dict]:
        if self._documents is None:
            async with self._lock:
                if self._documents is None:
                    self._documents = await self._read_documents()
        return self._documents

    # ─── PledgeStore ────────────────────────────────────────────

    async def insert(self, pledge: CanonicalPledge) -> PledgeId:
        stored = StoredPledge(
            id=PledgeId(uuid.uuid4()), created_at=self._clock(), pledge=pledge,
        )
        doc = stored.to_document()
        async with self._lock:
            if self._documents is None:
                self._documents = await self._read_documents()
            documents = self._documents
            if self.path is not None:
                try:
                    await asyncio.to_thread(self._write_file, [*documents, doc])
                except OSError as e:
                    logger.error(
                        f"Local store write failed: {e}",
                        extra={"backend": self.backend_name},
                    )
                    raise StoreUnavailableError("insert", str(e)) from e
            documents.append(doc)
        return stored.id

    async def list_recent(self, limit: int) -> list[StoredPledge]:
        if limit <= 0:
            return []
        documents = await self._load()
        # Newest appended last; reversing first keeps ties newest-first after the stable sort
        ordered = sorted(
            reversed(documents),
            key=lambda d: datetime.fromisoformat(d["createdAt"]),
            reverse=True,
        )
        return [_from_document(d) for d in ordered[:limit]]

    async def count_by_profile_type(self, profile_type: str) -> int:
        documents = await self._load()
        return sum(1 for d in documents if d["profileType"] == profile_type)

    async def count_all(self) -> int:
        return len(await self._load())

    async def profile_type_counts(self) -> dict[str, int]:
        documents = await self._load()
        return dict(Counter(d["profileType"] for d in documents))

    async def commitment_counts(self) -> dict[str, int]:
        documents = await self._load()
        counts: Counter[str] = Counter()
        for d in documents:
            counts.update(set(d.get("commitments") or ()))
        return dict(counts)

    async def health_check(self) -> bool:
        try:
            await self._load()
            return True
        except StoreUnavailableError:
            return False
