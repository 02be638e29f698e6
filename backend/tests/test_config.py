"""Settings — env parsing and startup validation."""

import pytest
from pydantic import ValidationError

from pledgewall.config import Settings
from pledgewall.core.domain_types import StoreBackend


def test_postgres_url_converted_to_asyncpg():
    s = Settings(database_url="postgresql://u:p@host:5432/climate_action")
    assert s.database_url == "postgresql+asyncpg://u:p@host:5432/climate_action"


def test_defaults():
    s = Settings(_env_file=None)
    assert s.pledge_target == 1_000_000
    assert s.list_default_limit == 50
    assert s.list_max_limit == 200
    assert s.taxonomy_version == "v1"


def test_zero_target_rejected():
    with pytest.raises(ValidationError):
        Settings(pledge_target=0)


def test_unknown_taxonomy_version_rejected():
    with pytest.raises(ValidationError):
        Settings(taxonomy_version="v9")


def test_store_backend_from_env(monkeypatch):
    monkeypatch.setenv("STORE_BACKEND", "local")
    assert Settings().store_backend is StoreBackend.LOCAL


def test_list_ceiling_cannot_exceed_200(monkeypatch):
    monkeypatch.setenv("LIST_MAX_LIMIT", "10000")
    with pytest.raises(ValidationError):
        Settings()


def test_list_ceiling_can_be_lowered():
    assert Settings(list_max_limit=100).list_max_limit == 100
