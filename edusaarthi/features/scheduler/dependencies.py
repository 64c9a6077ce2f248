"""
Scheduler Feature Dependencies
Builds the collaborators once per process and exposes the scheduler
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from edusaarthi.core.config import settings
from edusaarthi.core.database.session import AsyncSessionLocal
from edusaarthi.infrastructure.ai.factory import get_ai_factory
from edusaarthi.infrastructure.email.providers.smtp import SMTPEmailTransport
from edusaarthi.features.activity.service import ActivityService
from edusaarthi.features.extraction.service import TextExtractor
from edusaarthi.features.generation.service import ContentGenerator
from edusaarthi.features.notification.service import Notifier
from .executor import TaskExecutor
from .runner import TaskScheduler

# global scheduler reference (set in main.py lifespan)
_scheduler: Optional[TaskScheduler] = None


def build_scheduler(
    session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
) -> TaskScheduler:
    """Wire the model capability, extractor, generator, notifier and executor"""
    session_factory = session_factory or AsyncSessionLocal
    text_provider = get_ai_factory().get_text_provider()

    executor = TaskExecutor(
        extractor=TextExtractor(base_path=settings.upload_base_path),
        generator=ContentGenerator(
            text_provider,
            max_input_chars=settings.generation_max_input_chars,
        ),
        notifier=Notifier(SMTPEmailTransport()),
        activity_service=ActivityService(session_factory),
        session_factory=session_factory,
        timeout_seconds=settings.scheduler_task_timeout_seconds,
    )
    return TaskScheduler(
        executor,
        session_factory=session_factory,
        interval_seconds=settings.scheduler_interval_seconds,
    )


def set_scheduler(scheduler: Optional[TaskScheduler]) -> None:
    """Scheduler setter (called from lifespan)"""
    global _scheduler
    _scheduler = scheduler


def get_scheduler() -> Optional[TaskScheduler]:
    return _scheduler
