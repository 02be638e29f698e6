"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PledgeId wraps UUID — never use bare UUID in domain logic
    - ProgressRatio is bounded 0.0–1.0
    - Closed label sets encoded as Enums — no raw string matching in core

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

PledgeId = NewType("PledgeId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

ProgressRatio = NewType("ProgressRatio", float)   # 0.0–1.0


# ─── Enums ───────────────────────────────────────────────────────

class ProfileType(str, Enum):
    """Who is pledging — the canonical labels of taxonomy v1."""
    STUDENT = "Student"
    WORKING_PROFESSIONAL = "Working Professional"
    WORKSHOP_PARTICIPANT = "Workshop Participant"
    OTHER = "Other"


class CommitmentTheme(str, Enum):
    """Sustainability themes a pledge can commit to."""
    ENERGY = "Energy"
    TRANSPORTATION = "Transportation"
    CONSUMPTION = "Consumption"


class StoreBackend(str, Enum):
    """Persistence backends implementing the PledgeStore protocol."""
    SQL = "sql"
    LOCAL = "local"
