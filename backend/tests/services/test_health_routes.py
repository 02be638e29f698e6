"""Health & Readiness — liveness always 200, readiness follows the store."""

from pledgewall.infrastructure.pledge_store_factory import get_pledge_store
from pledgewall.main import app


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_ok(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"sql": "healthy"}}


async def test_readiness_503_when_store_down(client):
    class _DownStore:
        backend_name = "local"

        async def health_check(self):
            return False

    async def override():
        return _DownStore()

    app.dependency_overrides[get_pledge_store] = override
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "store_unavailable"
