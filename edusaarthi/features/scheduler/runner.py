"""
Scheduler Loop
Periodic polling of due tasks with sequential execution
"""

import asyncio
from datetime import datetime
from typing import Callable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from edusaarthi.core.config import settings
from edusaarthi.core.database.session import AsyncSessionLocal
from edusaarthi.core.logging import get_logger
from .executor import TaskExecutor
from .models import ScheduledTask
from .repository import ScheduledTaskRepository
from .schemas import TaskResult

logger = get_logger(__name__)


class TaskScheduler:
    """
    Scheduler owning a cancellable repeating interval

    tick() can be driven directly (tests, manual runs). start()/stop() manage
    the background loop for the process lifetime.
    """

    def __init__(
        self,
        executor: TaskExecutor,
        session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
        interval_seconds: Optional[float] = None,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        """
        Args:
            executor: task executor
            session_factory: session factory for the due-task query
            interval_seconds: delay between ticks
            clock: returns the current naive UTC instant
        """
        self.executor = executor
        self.session_factory = session_factory or AsyncSessionLocal
        self.interval_seconds = interval_seconds or settings.scheduler_interval_seconds
        self.clock = clock
        self._loop_task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._loop_task is not None and not self._loop_task.done()

    async def find_due_tasks(self) -> List[ScheduledTask]:
        async with self.session_factory() as session:
            repo = ScheduledTaskRepository(session)
            return await repo.find_due_and_pending(self.clock())

    async def tick(self) -> List[TaskResult]:
        """
        Run one poll

        Due tasks execute one at a time in store order. A fault in one task
        never prevents the remaining ones from running.

        Returns:
            List[TaskResult]: results of executed tasks
        """
        tasks = await self.find_due_tasks()

        if not tasks:
            logger.debug("Scheduler heartbeat, no due tasks")
            return []

        logger.info(f"Found {len(tasks)} pending tasks to execute")

        results = []
        for task in tasks:
            try:
                results.append(await self.executor.execute(task))
            except Exception as e:
                logger.error(f"Unhandled error executing task {task.id}: {e}", exc_info=True)
        return results

    async def _run_forever(self) -> None:
        while True:
            try:
                await asyncio.sleep(self.interval_seconds)
                await self.tick()
            except asyncio.CancelledError:
                logger.info("Scheduler loop cancelled")
                raise
            except Exception as e:
                logger.error(f"Scheduler tick error: {e}", exc_info=True)

    def start(self) -> None:
        """Start the repeating interval (idempotent)"""
        if self.is_running:
            return
        self._loop_task = asyncio.create_task(self._run_forever(), name="scheduled-task-loop")
        logger.info(f"Scheduler initialized (checking every {self.interval_seconds:g} seconds)")

    async def stop(self) -> None:
        """Cancel the repeating interval and wait for it to finish"""
        if self._loop_task is None:
            return
        self._loop_task.cancel()
        try:
            await self._loop_task
        except asyncio.CancelledError:
            pass
        self._loop_task = None
        logger.info("Scheduler stopped")
