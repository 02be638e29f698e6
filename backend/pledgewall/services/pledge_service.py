"""Pledge Service — validate, persist, and aggregate pledges.

Invariants:
    - submit_pledge validates fully before touching the store (no partial writes)
    - list_public_pledges never returns more than list_max_limit views, none with email/mobile
    - Store errors propagate unchanged (no retries here)

Design Decisions:
    - Functions over a service class: every call is stateless and gets its store injected
      (ADR: impureim sandwich — pure validate, IO insert/read, pure stats)
"""

import logging

from pledgewall.core.domain_types import PledgeId, ProgressRatio
from pledgewall.core.errors import MissingFieldsError
from pledgewall.core.pledge_records import PublicPledgeView, to_public_view
from pledgewall.core.pledge_stats import clamp_limit, compute_pledge_stats, progress_ratio
from pledgewall.core.repository_protocols import PledgeStore
from pledgewall.core.taxonomy import Taxonomy
from pledgewall.core.validate_pledge import validate_pledge

logger = logging.getLogger(__name__)


async def submit_pledge(
    store: PledgeStore, raw: object, taxonomy: Taxonomy,
) -> PledgeId:
    """Validate a raw submission and insert it. Returns the new pledge id."""
    try:
        pledge = validate_pledge(raw, taxonomy)
    except MissingFieldsError as e:
        logger.info(
            "Pledge rejected: missing fields",
            extra={"missing_fields": e.missing, "error_code": e.code},
        )
        raise
    pledge_id = await store.insert(pledge)
    logger.info(
        "Pledge stored",
        extra={
            "pledge_id": str(pledge_id),
            "profile_type": pledge.profile_type,
            "backend": store.backend_name,
        },
    )
    return pledge_id


async def list_public_pledges(
    store: PledgeStore, limit: int | None, default: int, ceiling: int,
) -> list[PublicPledgeView]:
    """Newest-first public views, page size clamped into [0, ceiling]."""
    bounded = clamp_limit(limit, default, ceiling)
    stored = await store.list_recent(bounded)
    return [to_public_view(s) for s in stored[:bounded]]


async def count_by_profile_type(
    store: PledgeStore, label: str, taxonomy: Taxonomy,
) -> int:
    """Count pledges for a label; legacy aliases resolve, unknown labels count 0."""
    canonical = taxonomy.resolve_profile_type(label.strip())
    if canonical is None:
        return 0
    return await store.count_by_profile_type(canonical)


async def current_progress(store: PledgeStore, target: int) -> ProgressRatio:
    return progress_ratio(await store.count_all(), target)


async def pledge_stats(
    store: PledgeStore, target: int, taxonomy: Taxonomy,
) -> dict:
    total = await store.count_all()
    by_profile = await store.profile_type_counts()
    by_commitment = await store.commitment_counts()
    return compute_pledge_stats(total, by_profile, by_commitment, target, taxonomy)
