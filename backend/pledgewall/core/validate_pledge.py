"""Pledge Validation — pure mapping from a raw submission to a CanonicalPledge.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Required fields: name, email, mobile, profileType, commitments
    - Every missing field is reported at once, in REQUIRED_FIELDS order
    - Unknown profileType is rejected; unknown commitment tags are dropped
    - Returned commitments are duplicate-free and drawn only from the taxonomy

Design Decisions:
    - Raise typed errors (not error dicts): the route has a single global handler
      and validation must finish before any persistence attempt
    - Commitment filtering happens here, once, so no backend can diverge on it
"""

from collections.abc import Mapping
from typing import Any

from pledgewall.core.errors import (
    InvalidEnumError, MalformedSubmissionError, MissingFieldsError,
)
from pledgewall.core.pledge_records import CanonicalPledge
from pledgewall.core.taxonomy import TAXONOMY_V1, Taxonomy

REQUIRED_FIELDS = ("name", "email", "mobile", "profileType", "commitments")


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def find_missing_fields(raw: Mapping[str, Any]) -> list[str]:
    """Return required fields that are absent, null, blank or not text."""
    missing = []
    for name in REQUIRED_FIELDS:
        value = raw.get(name)
        if _is_missing(value):
            missing.append(name)
        elif name != "commitments" and not isinstance(value, str):
            missing.append(name)
    return missing


def _optional_text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def normalize_commitments(value: Any, taxonomy: Taxonomy) -> tuple[str, ...]:
    """Keep taxonomy tags only, first occurrence wins; non-sequences become empty."""
    if not isinstance(value, (list, tuple)):
        return ()
    seen: list[str] = []
    for tag in value:
        if not isinstance(tag, str):
            continue
        tag = tag.strip()
        if taxonomy.is_commitment_theme(tag) and tag not in seen:
            seen.append(tag)
    return tuple(seen)


def validate_pledge(
    raw: Any, taxonomy: Taxonomy = TAXONOMY_V1,
) -> CanonicalPledge:
    """Validate and normalize a submission. Raises on rejection, pure otherwise."""
    if not isinstance(raw, Mapping):
        raise MalformedSubmissionError("expected a JSON object")

    missing = find_missing_fields(raw)
    if missing:
        raise MissingFieldsError(missing)

    label = raw["profileType"].strip()
    profile_type = taxonomy.resolve_profile_type(label)
    if profile_type is None:
        raise InvalidEnumError(
            "profileType", raw["profileType"], list(taxonomy.profile_types),
        )

    return CanonicalPledge(
        name=raw["name"].strip(),
        email=raw["email"].strip().lower(),
        mobile=raw["mobile"].strip(),
        state=_optional_text(raw.get("state")),
        profile_type=profile_type,
        commitments=normalize_commitments(raw["commitments"], taxonomy),
        message=_optional_text(raw.get("message")),
    )
