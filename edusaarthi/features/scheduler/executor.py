"""
Task Executor
Drives one scheduled task from pending to a terminal state
"""

import asyncio
import uuid
from typing import Dict, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from edusaarthi.core.config import settings
from edusaarthi.core.database.session import AsyncSessionLocal
from edusaarthi.core.exceptions import AppException
from edusaarthi.core.logging import get_logger
from edusaarthi.core.utils.trace import log_process
from edusaarthi.features.activity.service import ActivityService
from edusaarthi.features.extraction.service import DocumentKind, TextExtractor
from edusaarthi.features.generation.schemas import ContentType, GeneratedContent
from edusaarthi.features.generation.service import ContentGenerator
from edusaarthi.features.notification.schemas import DeliveryReport, DeliveryResult
from edusaarthi.features.notification.service import Notifier
from .exceptions import TaskTimeoutError, UnsupportedTaskTypeError
from .formatter import EmailFormatter
from .models import ScheduledTask, TaskType
from .repository import ScheduledTaskRepository
from .schemas import ExecutionOutcome, TaskResult

logger = get_logger(__name__)

# automation is the legacy name for question generation
TASK_CONTENT_TYPES: Dict[str, ContentType] = {
    TaskType.QUESTION_GENERATION.value: ContentType.QUESTIONS,
    TaskType.AUTOMATION.value: ContentType.QUESTIONS,
    TaskType.QUIZ.value: ContentType.QUIZ,
    TaskType.FILL_IN_BLANKS.value: ContentType.FILL_IN_BLANKS,
    TaskType.TRUE_FALSE.value: ContentType.TRUE_FALSE,
    TaskType.SUBJECTIVE.value: ContentType.SUBJECTIVE,
}

CONTENT_LABELS: Dict[ContentType, Tuple[str, str]] = {
    # (title suffix, description noun)
    ContentType.QUESTIONS: ("Generated Questions", "questions"),
    ContentType.QUIZ: ("Generated Quiz", "quiz"),
    ContentType.FILL_IN_BLANKS: ("Generated Fill-in-the-Blanks", "fill-in-the-blank questions"),
    ContentType.TRUE_FALSE: ("Generated True/False Questions", "true/false questions"),
    ContentType.SUBJECTIVE: ("Generated Subjective Questions", "subjective questions"),
}


def parse_recipients(raw: Optional[str]) -> List[str]:
    """Split a comma separated address list, trimming whitespace and dropping empties"""
    if not raw:
        return []
    return [address.strip() for address in raw.split(",") if address.strip()]


def resolve_content_type(task_type: str) -> ContentType:
    try:
        return TASK_CONTENT_TYPES[task_type]
    except KeyError:
        raise UnsupportedTaskTypeError(task_type) from None


def error_message(error: BaseException) -> str:
    """Message stored in the task's error field"""
    if isinstance(error, AppException):
        return error.message
    return str(error) or error.__class__.__name__


class TaskExecutor:
    """
    Scheduled task executor

    execute() claims the task, runs extraction, generation, activity logging,
    formatting and notification, then writes the terminal status. It never
    raises: every failure ends as status=failed with the error message.
    """

    def __init__(
        self,
        extractor: TextExtractor,
        generator: ContentGenerator,
        notifier: Notifier,
        activity_service: ActivityService,
        formatter: Optional[EmailFormatter] = None,
        session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
        timeout_seconds: Optional[float] = None,
    ):
        self.extractor = extractor
        self.generator = generator
        self.notifier = notifier
        self.activity_service = activity_service
        self.formatter = formatter or EmailFormatter()
        self.session_factory = session_factory or AsyncSessionLocal
        self.timeout_seconds = timeout_seconds or settings.scheduler_task_timeout_seconds

    async def execute(self, task: ScheduledTask) -> TaskResult:
        """
        Execute one task

        Args:
            task: due task (status pending)

        Returns:
            TaskResult: completed, failed, or skipped when the claim was lost
        """
        task_id = task.id
        log = logger.bind(task_id=str(task_id), task_type=task.task_type)

        try:
            claimed = await self._claim(task_id)
        except Exception as e:
            log.error(f"Failed to claim task: {e}", exc_info=True)
            return TaskResult(task_id=str(task_id), outcome=ExecutionOutcome.FAILED, error=error_message(e))

        if not claimed:
            log.info("Task already claimed, skipping")
            return TaskResult(task_id=str(task_id), outcome=ExecutionOutcome.SKIPPED)

        log.info(f"Executing scheduled task for user {task.user_id}")

        budget = asyncio.timeout(self.timeout_seconds)
        try:
            async with budget:
                content, report = await self._run(task)
            await self._mark_completed(task_id)
        except TimeoutError as e:
            # only the execution budget maps to TaskTimeoutError; other timeouts keep their message
            error = TaskTimeoutError(self.timeout_seconds) if budget.expired() else e
            return await self._fail(task_id, error)
        except Exception as e:
            return await self._fail(task_id, e)

        log.info("Task completed successfully", sent=report.sent, failed=report.failed, skipped=report.skipped)
        return TaskResult(
            task_id=str(task_id),
            outcome=ExecutionOutcome.COMPLETED,
            content_type=content.type,
            degraded=content.degraded,
            delivery=report,
        )

    @log_process(step="Execute Task", desc="scheduled task pipeline")
    async def _run(self, task: ScheduledTask) -> Tuple[GeneratedContent, DeliveryReport]:
        # 1-2. extraction (missing file fails before any generation)
        kind = DocumentKind.from_file_name(task.file_path)
        text = await self.extractor.extract(task.file_path, kind)

        # 3. generation
        content_type = resolve_content_type(task.task_type)
        count = task.question_count or settings.generation_default_count
        content = await self.generator.generate(content_type, text, count)

        # 4. activity
        title_suffix, noun = CONTENT_LABELS[content_type]
        title = f"Scheduled: {title_suffix}"
        await self.activity_service.create_activity(
            user_id=task.user_id,
            title=title,
            description=f"AI-generated {noun} from {task.original_file_name}",
            type=task.task_type,
            file_name=task.original_file_name,
            file_path=task.file_path,
            content=content.model_dump(mode="json", by_alias=True),
        )

        # 5-6. recipients and body
        recipients = parse_recipients(task.recipient_emails)
        html = self.formatter.render_report(title, content, task.original_file_name)

        # 7. delivery, per recipient
        report = await self._notify(recipients, f"Edusaarthi Scheduled Task: {title}", html)
        return content, report

    async def _notify(self, recipients: List[str], subject: str, html: str) -> DeliveryReport:
        report = DeliveryReport()
        for recipient in recipients:
            try:
                result = await self.notifier.send(recipient, subject, html)
            except Exception as e:
                logger.error(f"Notifier raised for {recipient}: {e}", exc_info=True)
                result = DeliveryResult(recipient=recipient, success=False, error=error_message(e))
            report.record(result)

        logger.info(
            "Delivery report",
            recipients=len(recipients),
            sent=report.sent,
            failed=report.failed,
            skipped=report.skipped,
        )
        return report

    # ==================== Status transitions ====================

    async def _claim(self, task_id: uuid.UUID) -> bool:
        async with self.session_factory() as session:
            repo = ScheduledTaskRepository(session)
            claimed = await repo.claim(task_id)
            await session.commit()
        return claimed

    async def _mark_completed(self, task_id: uuid.UUID) -> None:
        async with self.session_factory() as session:
            repo = ScheduledTaskRepository(session)
            await repo.mark_completed(task_id)
            await session.commit()

    async def _fail(self, task_id: uuid.UUID, error: BaseException) -> TaskResult:
        message = error_message(error)
        logger.error(
            f"Task {task_id} failed: {message}",
            task_id=str(task_id),
            error_type=error.__class__.__name__,
            exc_info=not isinstance(error, AppException),
        )

        try:
            async with self.session_factory() as error_session:
                error_repo = ScheduledTaskRepository(error_session)
                await error_repo.mark_failed(task_id, message)
                await error_session.commit()
        except Exception as db_error:
            logger.error(f"Failed to record failure for task {task_id}: {db_error}", exc_info=True)

        return TaskResult(task_id=str(task_id), outcome=ExecutionOutcome.FAILED, error=message)
