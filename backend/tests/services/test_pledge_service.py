"""Pledge Service — validate → persist → derive, against both backends.

Invariants:
    - Rejected submissions never reach the store
    - The same validator output is stored identically by SQL and local backends
    - Listing is clamped and redacted
"""

import pytest

from pledgewall.core.errors import InvalidEnumError, MissingFieldsError
from pledgewall.infrastructure.local_pledge_store import LocalPledgeStore
from pledgewall.services import pledge_service

from tests.support import TickingClock


@pytest.fixture(params=["sql", "local"])
def store(request, sql_store):
    if request.param == "sql":
        return sql_store
    return LocalPledgeStore(clock=TickingClock())


def _raw(name: str, profile_type: str = "Student", commitments=None) -> dict:
    return {
        "name": name,
        "email": f"{name}@example.com",
        "mobile": "999",
        "state": "Goa",
        "profileType": profile_type,
        "commitments": commitments or ["Energy"],
    }


async def test_submit_asha_stores_normalized_record(store, taxonomy, asha):
    pledge_id = await pledge_service.submit_pledge(store, asha, taxonomy)

    [stored] = await store.list_recent(10)
    assert stored.id == pledge_id
    assert stored.pledge.email == "a@x.com"
    assert stored.pledge.commitments == ("Energy",)
    assert stored.pledge.name == "Asha"


async def test_missing_fields_store_nothing(store, taxonomy):
    with pytest.raises(MissingFieldsError) as exc:
        await pledge_service.submit_pledge(store, {"name": "Asha"}, taxonomy)
    assert exc.value.missing == ["email", "mobile", "profileType", "commitments"]
    assert await store.count_all() == 0


async def test_astronaut_rejected_and_count_stays_zero(store, taxonomy, asha):
    asha["profileType"] = "Astronaut"
    with pytest.raises(InvalidEnumError):
        await pledge_service.submit_pledge(store, asha, taxonomy)
    assert await store.count_all() == 0
    assert await pledge_service.count_by_profile_type(store, "Astronaut", taxonomy) == 0


async def test_list_public_pledges_newest_first_and_redacted(store, taxonomy):
    await pledge_service.submit_pledge(store, _raw("a"), taxonomy)
    await pledge_service.submit_pledge(store, _raw("b"), taxonomy)

    views = await pledge_service.list_public_pledges(store, None, 50, 200)

    assert [v.name for v in views] == ["b", "a"]
    for v in views:
        assert not hasattr(v, "email")
        assert not hasattr(v, "mobile")


async def test_list_public_pledges_clamped_to_ceiling(store, taxonomy):
    for i in range(5):
        await pledge_service.submit_pledge(store, _raw(f"p{i}"), taxonomy)
    assert len(await pledge_service.list_public_pledges(store, 500, 50, 3)) == 3
    assert len(await pledge_service.list_public_pledges(store, 2, 50, 3)) == 2
    assert await pledge_service.list_public_pledges(store, -1, 50, 3) == []


async def test_count_by_profile_type_resolves_alias(store, taxonomy):
    await pledge_service.submit_pledge(store, _raw("d", "Workshops"), taxonomy)
    assert await pledge_service.count_by_profile_type(
        store, "Workshop Participant", taxonomy,
    ) == 1
    assert await pledge_service.count_by_profile_type(store, "Workshops", taxonomy) == 1


async def test_count_by_profile_type_never_decreases(store, taxonomy):
    counts = []
    for i in range(3):
        await pledge_service.submit_pledge(store, _raw(f"s{i}"), taxonomy)
        counts.append(
            await pledge_service.count_by_profile_type(store, "Student", taxonomy),
        )
    assert counts == sorted(counts) == [1, 2, 3]


async def test_current_progress_caps_at_one(store, taxonomy):
    for i in range(3):
        await pledge_service.submit_pledge(store, _raw(f"s{i}"), taxonomy)
    assert await pledge_service.current_progress(store, 4) == 0.75
    assert await pledge_service.current_progress(store, 2) == 1.0


async def test_pledge_stats(store, taxonomy):
    await pledge_service.submit_pledge(
        store, _raw("a", "Student", ["Energy", "Transportation"]), taxonomy,
    )
    await pledge_service.submit_pledge(store, _raw("b", "Other"), taxonomy)

    stats = await pledge_service.pledge_stats(store, 1_000_000, taxonomy)

    assert stats["total"] == 2
    assert stats["byProfileType"]["Student"] == 1
    assert stats["byProfileType"]["Working Professional"] == 0
    assert stats["byCommitment"] == {
        "Energy": 2, "Transportation": 1, "Consumption": 0,
    }
    assert stats["progressRatio"] == 2 / 1_000_000
