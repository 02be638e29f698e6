"""Pledge ORM — persists one user's climate pledge.

Invariants:
    - id is a UUID primary key assigned by the store, never by the caller
    - created_at is set once on insert and never updated
    - commitments is a JSON array of taxonomy themes (already filtered by the validator)
    - No relationship to any other table: a pledge is self-contained

Design Decisions:
    - JSON column for commitments: mirrors the document layout, no join table
      (ADR: counts by theme are computed in Python at campaign scale)
    - Index on (profile_type) and (created_at): the two read paths are
      count-by-label and newest-first listing
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from pledgewall.db.base import Base


class Pledge(Base):
    """Pledge entity — append-only."""
    __tablename__ = "pledges"
    __table_args__ = (
        Index("ix_pledges_profile_type", "profile_type"),
        Index("ix_pledges_created_at", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    mobile: Mapped[str] = mapped_column(Text, nullable=False)
    state: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )
    profile_type: Mapped[str] = mapped_column(String(50), nullable=False)
    commitments: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
