"""
Scheduled Task Repository Tests
"""

from datetime import timedelta

import pytest

from edusaarthi.features.scheduler.models import ScheduledTaskStatus
from edusaarthi.features.scheduler.repository import ScheduledTaskRepository


@pytest.mark.asyncio
async def test_find_due_and_pending_boundary(db_session, create_task, now):
    on_time = await create_task(scheduled_date=now)
    earlier = await create_task(scheduled_date=now - timedelta(hours=1))
    await create_task(scheduled_date=now + timedelta(microseconds=1))

    due = await ScheduledTaskRepository(db_session).find_due_and_pending(now)

    assert [t.id for t in due] == [earlier.id, on_time.id]


@pytest.mark.asyncio
async def test_claim_is_won_once(session_factory, create_task):
    task = await create_task()

    async with session_factory() as session:
        repo = ScheduledTaskRepository(session)
        first = await repo.claim(task.id)
        second = await repo.claim(task.id)
        await session.commit()

    assert (first, second) == (True, False)


@pytest.mark.asyncio
async def test_mark_failed_and_completed(session_factory, create_task, get_task):
    failed = await create_task()
    completed = await create_task()

    async with session_factory() as session:
        repo = ScheduledTaskRepository(session)
        await repo.mark_failed(failed.id, "File not found: x.pdf")
        await repo.mark_completed(completed.id)
        await session.commit()

    stored_failed = await get_task(failed.id)
    assert stored_failed.status == ScheduledTaskStatus.FAILED.value
    assert stored_failed.error == "File not found: x.pdf"
    assert stored_failed.is_terminal
    assert (await get_task(completed.id)).status == ScheduledTaskStatus.COMPLETED.value


@pytest.mark.asyncio
async def test_save_updates_status(session_factory, create_task, get_task):
    task = await create_task()
    task.status = ScheduledTaskStatus.FAILED.value
    task.error = "reset by operator"

    async with session_factory() as session:
        await ScheduledTaskRepository(session).save(task)
        await session.commit()

    stored = await get_task(task.id)
    assert stored.status == ScheduledTaskStatus.FAILED.value
    assert stored.error == "reset by operator"
