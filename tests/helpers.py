"""Shared builders for tests: settings without .env and an in-memory SQLite Database."""

from sqlalchemy.pool import StaticPool

from acquisitions.core.config import Settings
from acquisitions.core.database import Database
from acquisitions.models import Base


def make_settings(**overrides: object) -> Settings:
    """Build Settings for tests, ignoring any local .env file."""
    values: dict[str, object] = {"APP_ENV": "test", "JWT_SECRET": "test-secret"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_database() -> Database:
    """In-memory SQLite shared across threads (TestClient runs sync endpoints in a threadpool)."""
    database = Database(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(database.engine)
    return database
