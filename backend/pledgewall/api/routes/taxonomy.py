"""Taxonomy Route — exposes the active profile types and commitment themes.

Invariants:
    - Read-only; reflects the version selected by settings.taxonomy_version
"""

from fastapi import APIRouter, Depends

from pledgewall.api.dependencies import get_active_taxonomy
from pledgewall.core.taxonomy import Taxonomy

router = APIRouter(prefix="/api/v1/taxonomy", tags=["taxonomy"])


@router.get("")
async def get_taxonomy(taxonomy: Taxonomy = Depends(get_active_taxonomy)):
    """Labels and suggested actions the pledge form should offer."""
    return {"ok": True, **taxonomy.to_dict()}
