"""
Pytest Configuration and Fixtures
"""

import os

# test settings must be in place before edusaarthi.core.config is imported
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SCHEDULER_ENABLED", "false")

import uuid
from datetime import datetime, timedelta
from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from edusaarthi.core.database.base import Base
from edusaarthi.features.activity import models as activity_models  # noqa: F401
from edusaarthi.features.scheduler.models import ScheduledTask, ScheduledTaskStatus

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


def _test_engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # one shared connection keeps the in-memory database alive across sessions
        return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


@pytest.fixture
async def db_engine():
    """Fresh schema per test"""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, **_test_engine_options(TEST_DATABASE_URL))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def now() -> datetime:
    return datetime(2025, 1, 15, 9, 0, 0)


@pytest.fixture
def create_task(session_factory, now):
    """
    Insert a scheduled task

    Defaults describe a due question_generation task for one recipient.
    """

    async def _create(**overrides) -> ScheduledTask:
        values = {
            "user_id": uuid.uuid4(),
            "file_path": "uploads/notes.txt",
            "original_file_name": "notes.txt",
            "task_type": "question_generation",
            "question_count": 5,
            "recipient_emails": "instructor@example.com",
            "scheduled_date": now - timedelta(minutes=1),
            "status": ScheduledTaskStatus.PENDING.value,
        }
        values.update(overrides)
        async with session_factory() as session:
            task = ScheduledTask(**values)
            session.add(task)
            await session.commit()
            await session.refresh(task)
        return task

    return _create


@pytest.fixture
def get_task(session_factory):
    """Reload a task by id from a new session"""

    async def _get(task_id) -> ScheduledTask:
        async with session_factory() as session:
            return await session.get(ScheduledTask, task_id)

    return _get


@pytest.fixture
def mock_ai_provider():
    provider = AsyncMock()
    provider.model_name = "test-model"
    provider.generate_text.return_value = '["What is a register?"]'
    return provider


@pytest.fixture
def mock_notifier():
    notifier = AsyncMock()
    notifier.send.return_value = None
    return notifier
