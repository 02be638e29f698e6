"""Pledge Routes — submit, list, count and stats for the public pledge wall.

Invariants:
    - POST validates the whole body before any store call (400 on rejection)
    - GET list clamps limit to [0, list_max_limit]; out-of-range values are clamped, not rejected
    - No response ever includes email or mobile
    - Store failures reach the global handler as StoreUnavailableError (500)

Design Decisions:
    - POST reads the raw JSON body instead of a Pydantic model: the core validator
      reports every missing field in one MissingFieldsError
    - Routes stay thin: all logic lives in services/pledge_service.py
"""

import json
import logging

from fastapi import APIRouter, Depends, Query, Request, status

from pledgewall.api.dependencies import get_active_taxonomy, get_app_settings
from pledgewall.config import Settings
from pledgewall.core.errors import MalformedSubmissionError
from pledgewall.core.repository_protocols import PledgeStore
from pledgewall.core.taxonomy import Taxonomy
from pledgewall.infrastructure.pledge_store_factory import get_pledge_store
from pledgewall.schemas.pledge import (
    PledgeListResponse,
    PledgeStatsResponse,
    ProfileTypeCountResponse,
    PublicPledgeResponse,
    SubmitPledgeResponse,
)
from pledgewall.services import pledge_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/pledges", tags=["pledges"])


async def _read_json_body(request: Request) -> object:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedSubmissionError(f"invalid JSON ({e.__class__.__name__})") from e


@router.post(
    "", response_model=SubmitPledgeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_pledge(
    request: Request,
    store: PledgeStore = Depends(get_pledge_store),
    taxonomy: Taxonomy = Depends(get_active_taxonomy),
):
    """Validate and store a new pledge."""
    body = await _read_json_body(request)
    pledge_id = await pledge_service.submit_pledge(store, body, taxonomy)
    return SubmitPledgeResponse(id=pledge_id)


@router.get("", response_model=PledgeListResponse)
async def list_pledges(
    limit: int | None = Query(None),
    store: PledgeStore = Depends(get_pledge_store),
    settings: Settings = Depends(get_app_settings),
):
    """Newest-first public pledge wall; private fields are never included."""
    views = await pledge_service.list_public_pledges(
        store, limit, settings.list_default_limit, settings.list_max_limit,
    )
    return PledgeListResponse(
        pledges=[PublicPledgeResponse.from_view(v) for v in views],
    )


@router.get("/count", response_model=ProfileTypeCountResponse)
async def count_pledges(
    profile_type: str = Query(..., alias="profileType", min_length=1),
    store: PledgeStore = Depends(get_pledge_store),
    taxonomy: Taxonomy = Depends(get_active_taxonomy),
):
    """Number of pledges for one profile type (0 for unknown labels)."""
    count = await pledge_service.count_by_profile_type(store, profile_type, taxonomy)
    return ProfileTypeCountResponse(profile_type=profile_type, count=count)


@router.get("/stats", response_model=PledgeStatsResponse)
async def pledge_stats(
    store: PledgeStore = Depends(get_pledge_store),
    settings: Settings = Depends(get_app_settings),
    taxonomy: Taxonomy = Depends(get_active_taxonomy),
):
    """Totals, per-category breakdowns and progress toward the campaign target."""
    stats = await pledge_service.pledge_stats(store, settings.pledge_target, taxonomy)
    return PledgeStatsResponse(**stats)
