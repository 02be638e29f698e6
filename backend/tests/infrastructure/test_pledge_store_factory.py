"""Pledge Store Factory — backend selection from settings."""

import pytest

from pledgewall.config import Settings
from pledgewall.infrastructure import pledge_store_factory
from pledgewall.infrastructure.local_pledge_store import LocalPledgeStore
from pledgewall.infrastructure.sql_pledge_store import SqlPledgeStore


def test_builds_local_store(tmp_path):
    store = pledge_store_factory.build_pledge_store(
        Settings(store_backend="local", local_store_path=str(tmp_path / "p.json")),
    )
    assert isinstance(store, LocalPledgeStore)
    assert store.path == tmp_path / "p.json"


def test_builds_sql_store_without_connecting():
    store = pledge_store_factory.build_pledge_store(
        Settings(store_backend="sql", database_url="sqlite+aiosqlite:///:memory:"),
    )
    assert isinstance(store, SqlPledgeStore)
    assert store.db_manager.initialized is False


async def test_get_pledge_store_before_init_raises(monkeypatch):
    monkeypatch.setattr(pledge_store_factory, "pledge_store", None)
    with pytest.raises(RuntimeError):
        await pledge_store_factory.get_pledge_store()


async def test_init_store_sets_singleton(monkeypatch):
    monkeypatch.setattr(pledge_store_factory, "pledge_store", None)
    store = pledge_store_factory.init_store(Settings(store_backend="local", local_store_path=""))
    assert await pledge_store_factory.get_pledge_store() is store
