"""
Settings Tests
"""

import pytest
from pydantic import ValidationError

from edusaarthi.core.config import Settings


def test_database_url_override(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./local.db")
    assert Settings().database_url == "sqlite+aiosqlite:///./local.db"


def test_database_url_from_postgres_parts(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(
        _env_file=None,
        postgres_user="u",
        postgres_password="p",
        postgres_host="db",
        postgres_port=5433,
        postgres_db="edu",
    )
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5433/edu"


def test_invalid_app_env():
    with pytest.raises(ValidationError):
        Settings(app_env="staging")


@pytest.mark.parametrize("field", ["scheduler_interval_seconds", "scheduler_task_timeout_seconds"])
def test_scheduler_durations_must_be_positive(field):
    with pytest.raises(ValidationError):
        Settings(**{field: 0})
