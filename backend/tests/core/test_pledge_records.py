"""Pledge Records — persisted layout and public redaction."""

import dataclasses
from datetime import datetime, timezone
from uuid import uuid4

import pytest

from pledgewall.core.domain_types import PledgeId
from pledgewall.core.pledge_records import (
    CanonicalPledge, PublicPledgeView, StoredPledge, to_public_view,
)


def _stored() -> StoredPledge:
    return StoredPledge(
        id=PledgeId(uuid4()),
        created_at=datetime(2025, 5, 15, 9, 30, tzinfo=timezone.utc),
        pledge=CanonicalPledge(
            name="Janice", email="janice@example.com", mobile="123",
            state="Maharashtra", profile_type="Working Professional",
            commitments=("Energy", "Transportation"), message="",
        ),
    )


def test_public_view_has_no_private_fields():
    field_names = {f.name for f in dataclasses.fields(PublicPledgeView)}
    assert "email" not in field_names
    assert "mobile" not in field_names


def test_to_public_view_copies_public_fields():
    stored = _stored()
    view = to_public_view(stored)
    assert view.id == stored.id
    assert view.name == "Janice"
    assert view.commitments == ("Energy", "Transportation")
    assert view.created_at == stored.created_at


def test_document_layout():
    stored = _stored()
    doc = stored.to_document()
    assert set(doc) == {
        "_id", "name", "email", "mobile", "state",
        "profileType", "commitments", "message", "createdAt",
    }
    assert doc["_id"] == str(stored.id)
    assert doc["commitments"] == ["Energy", "Transportation"]
    assert doc["createdAt"] == "2025-05-15T09:30:00+00:00"


def test_records_are_immutable():
    stored = _stored()
    with pytest.raises(dataclasses.FrozenInstanceError):
        stored.pledge.email = "other@example.com"
