"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Stores offer append and read operations only (no update, no delete)
    - Implementations raise StoreUnavailableError on any persistence failure

Design Decisions:
    - Protocol over ABC: structural subtyping, the SQL and local backends share no base
    - Async in Protocol: implementations do IO, the validator and stats stay sync and pure
"""

from typing import Protocol

from pledgewall.core.domain_types import PledgeId
from pledgewall.core.pledge_records import CanonicalPledge, StoredPledge


class PledgeStore(Protocol):
    """Contract for pledge persistence — implemented by shell backends."""
    backend_name: str

    async def insert(self, pledge: CanonicalPledge) -> PledgeId: ...
    async def list_recent(self, limit: int) -> list[StoredPledge]: ...
    async def count_by_profile_type(self, profile_type: str) -> int: ...
    async def count_all(self) -> int: ...
    async def profile_type_counts(self) -> dict[str, int]: ...
    async def commitment_counts(self) -> dict[str, int]: ...
    async def health_check(self) -> bool: ...
