"""Test support — deterministic clock and in-memory database manager."""

from datetime import datetime, timedelta, timezone

from sqlalchemy.pool import StaticPool

from pledgewall.infrastructure.database import DatabaseSessionManager


class TickingClock:
    """Deterministic clock — each call is one second after the previous."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


def memory_db_manager() -> DatabaseSessionManager:
    return DatabaseSessionManager(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
