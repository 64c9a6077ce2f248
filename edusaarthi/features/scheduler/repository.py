"""
Scheduled Task Repository
Due-task queries and atomic status transitions
"""

import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from edusaarthi.domain.repositories.base import AbstractRepository
from .models import ScheduledTask, ScheduledTaskStatus


class ScheduledTaskRepository(AbstractRepository[ScheduledTask]):
    """Scheduled Task Repository"""

    def __init__(self, db: AsyncSession):
        super().__init__(db, ScheduledTask)

    async def find_due_and_pending(self, now: datetime) -> List[ScheduledTask]:
        """
        Tasks eligible for execution

        Args:
            now: reference instant (naive UTC)

        Returns:
            List[ScheduledTask]: pending tasks with scheduled_date <= now
        """
        query = (
            select(ScheduledTask)
            .where(
                ScheduledTask.status == ScheduledTaskStatus.PENDING.value,
                ScheduledTask.scheduled_date <= now,
            )
            .order_by(ScheduledTask.scheduled_date, ScheduledTask.created_at)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def claim(self, task_id: uuid.UUID) -> bool:
        """
        Move a task from pending to in_progress

        Conditional update, so only one caller can win a given task.

        Returns:
            bool: True if this caller claimed the task
        """
        result = await self.session.execute(
            update(ScheduledTask)
            .where(
                ScheduledTask.id == task_id,
                ScheduledTask.status == ScheduledTaskStatus.PENDING.value,
            )
            .values(
                status=ScheduledTaskStatus.IN_PROGRESS.value,
                updated_at=datetime.utcnow(),
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    async def mark_completed(self, task_id: uuid.UUID) -> Optional[ScheduledTask]:
        return await self.update(
            task_id,
            status=ScheduledTaskStatus.COMPLETED.value,
            error=None,
        )

    async def mark_failed(self, task_id: uuid.UUID, error: str) -> Optional[ScheduledTask]:
        return await self.update(
            task_id,
            status=ScheduledTaskStatus.FAILED.value,
            error=error,
        )

    async def save(self, task: ScheduledTask) -> ScheduledTask:
        """Insert or update a task"""
        merged = await self.session.merge(task)
        await self.session.flush()
        await self.session.refresh(merged)
        return merged
