"""Seed — sample pledges flow through the validator into the configured store."""

from pledgewall import seed as seed_module
from pledgewall.config import Settings


async def test_seed_inserts_samples_into_local_store(monkeypatch, tmp_path):
    settings = Settings(store_backend="local", local_store_path=str(tmp_path / "seed.json"))
    monkeypatch.setattr(seed_module, "get_settings", lambda: settings)

    total = await seed_module.seed()

    assert total == len(seed_module.SAMPLE_PLEDGES)


async def test_seed_is_append_only(monkeypatch, tmp_path):
    settings = Settings(store_backend="local", local_store_path=str(tmp_path / "seed.json"))
    monkeypatch.setattr(seed_module, "get_settings", lambda: settings)

    await seed_module.seed()
    total = await seed_module.seed()

    assert total == 2 * len(seed_module.SAMPLE_PLEDGES)
