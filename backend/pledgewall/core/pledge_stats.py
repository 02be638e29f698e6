"""Pledge Stats — pure computation of campaign KPIs from stored counts.

Invariants:
    - All inputs are plain counts (no IO, no DB)
    - progress_ratio is always within [0, 1] and equals 1 once total >= target
    - Every taxonomy label appears in the breakdowns, zero-filled

Design Decisions:
    - Pure functions, not store methods (ADR: stores count, core derives presentation)
    - target > 0 is enforced by Settings at startup, so no zero-division branch here
"""

from pledgewall.core.domain_types import ProgressRatio
from pledgewall.core.taxonomy import Taxonomy


def progress_ratio(total: int, target: int) -> ProgressRatio:
    """min(1, total / target), clamped to [0, 1]."""
    ratio = total / target
    return ProgressRatio(max(0.0, min(1.0, ratio)))


def clamp_limit(limit: int | None, default: int, ceiling: int) -> int:
    """Bound a requested page size into [0, ceiling]; None means default."""
    if limit is None:
        limit = default
    return max(0, min(limit, ceiling))


def compute_pledge_stats(
    total: int,
    by_profile_type: dict[str, int],
    by_commitment: dict[str, int],
    target: int,
    taxonomy: Taxonomy,
) -> dict:
    """Build the KPI payload shown above the pledge wall."""
    ratio = progress_ratio(total, target)
    return {
        "total": total,
        "target": target,
        "progressRatio": ratio,
        "progressPercentage": round(ratio * 100, 4),
        "byProfileType": {
            label: by_profile_type.get(label, 0)
            for label in taxonomy.profile_types
        },
        "byCommitment": {
            theme: by_commitment.get(theme, 0)
            for theme in taxonomy.commitment_themes
        },
    }
