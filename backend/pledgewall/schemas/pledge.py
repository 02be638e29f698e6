"""Pledge Schemas — Pydantic response models for the pledge endpoints.

Invariants:
    - PublicPledgeResponse has no email/mobile field (cannot leak them even by mistake)
    - Responses serialize with camelCase aliases (profileType, createdAt)

Design Decisions:
    - from_view() constructors keep core dataclasses free of Pydantic
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from pledgewall.core.pledge_records import PublicPledgeView


class SubmitPledgeResponse(BaseModel):
    """Pledge accepted and stored."""
    ok: bool = True
    id: UUID


class PublicPledgeResponse(BaseModel):
    """One card on the public pledge wall."""
    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    name: str
    state: str
    profile_type: str = Field(alias="profileType")
    commitments: list[str]
    message: str
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_view(cls, view: PublicPledgeView) -> "PublicPledgeResponse":
        return cls(
            id=view.id,
            name=view.name,
            state=view.state,
            profile_type=view.profile_type,
            commitments=list(view.commitments),
            message=view.message,
            created_at=view.created_at,
        )


class PledgeListResponse(BaseModel):
    """Newest-first page of the pledge wall."""
    ok: bool = True
    pledges: list[PublicPledgeResponse]


class ProfileTypeCountResponse(BaseModel):
    """Count of pledges for one profile type."""
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    profile_type: str = Field(alias="profileType")
    count: int = Field(ge=0)


class PledgeStatsResponse(BaseModel):
    """Campaign KPIs and progress toward the target."""
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    total: int = Field(ge=0)
    target: int = Field(gt=0)
    progress_ratio: float = Field(alias="progressRatio", ge=0.0, le=1.0)
    progress_percentage: float = Field(alias="progressPercentage", ge=0.0, le=100.0)
    by_profile_type: dict[str, int] = Field(alias="byProfileType")
    by_commitment: dict[str, int] = Field(alias="byCommitment")
