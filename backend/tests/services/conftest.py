"""Service test fixtures — FastAPI test client over the in-memory SQL store.

Invariants:
    - get_pledge_store dependency overridden to use the test store
    - Overrides cleared after every test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from pledgewall.infrastructure.pledge_store_factory import get_pledge_store
from pledgewall.main import app


@pytest.fixture
async def client(sql_store):
    """FastAPI test client with the pledge store dependency overridden."""
    async def override_get_pledge_store():
        return sql_store

    app.dependency_overrides[get_pledge_store] = override_get_pledge_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def asha():
    return {
        "name": "Asha",
        "email": "A@X.com ",
        "mobile": "999",
        "state": "Goa",
        "profileType": "Student",
        "commitments": ["Energy", "Bogus"],
    }
