"""Pledge Records — canonical, stored and public shapes of a pledge.

Invariants:
    - All three shapes are frozen dataclasses (pledges are immutable once created)
    - commitments is a tuple: ordered, duplicate-free, taxonomy-only
    - PublicPledgeView has no email/mobile attribute at all (redaction by construction)

Design Decisions:
    - Dataclasses in core, Pydantic only at the API boundary (ADR: core never imports pydantic)
    - to_document() is the persisted layout shared by every backend
"""

from dataclasses import dataclass
from datetime import datetime

from pledgewall.core.domain_types import PledgeId


@dataclass(frozen=True)
class CanonicalPledge:
    """A validated, normalized submission ready for storage."""
    name: str
    email: str
    mobile: str
    state: str
    profile_type: str
    commitments: tuple[str, ...]
    message: str = ""


@dataclass(frozen=True)
class StoredPledge:
    """A canonical pledge plus the identity and timestamp assigned by the store."""
    id: PledgeId
    created_at: datetime
    pledge: CanonicalPledge

    def to_document(self) -> dict:
        """Persisted record layout: {_id, name, ..., commitments, message, createdAt}."""
        p = self.pledge
        return {
            "_id": str(self.id),
            "name": p.name,
            "email": p.email,
            "mobile": p.mobile,
            "state": p.state,
            "profileType": p.profile_type,
            "commitments": list(p.commitments),
            "message": p.message,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class PublicPledgeView:
    """Projection safe for the public wall — private contact fields removed."""
    id: PledgeId
    name: str
    state: str
    profile_type: str
    commitments: tuple[str, ...]
    message: str
    created_at: datetime


def to_public_view(stored: StoredPledge) -> PublicPledgeView:
    p = stored.pledge
    return PublicPledgeView(
        id=stored.id,
        name=p.name,
        state=p.state,
        profile_type=p.profile_type,
        commitments=p.commitments,
        message=p.message,
        created_at=stored.created_at,
    )
