"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - pledge_target > 0 and the taxonomy version is registered, checked at load time

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pledgewall.core.domain_types import StoreBackend
from pledgewall.core.taxonomy import get_taxonomy


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://pledges:pledges@db:5432/climate_action"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    auto_create_schema: bool = False

    # Store
    store_backend: StoreBackend = StoreBackend.SQL
    local_store_path: str | None = "data/pledges.json"

    # Campaign
    taxonomy_version: str = "v1"
    pledge_target: int = Field(1_000_000, gt=0)
    list_default_limit: int = Field(50, ge=0)
    list_max_limit: int = Field(200, ge=1, le=200)

    @field_validator("taxonomy_version")
    @classmethod
    def check_taxonomy_version(cls, v: str) -> str:
        try:
            get_taxonomy(v)
        except KeyError as e:
            raise ValueError(str(e)) from None
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
