"""
Task Executor Tests
Terminal status writes and failure isolation
"""

import asyncio

import pytest
from unittest.mock import AsyncMock

from edusaarthi.core.exceptions import ErrorCode
from edusaarthi.features.activity.service import ActivityService
from edusaarthi.features.extraction.service import TextExtractor
from edusaarthi.features.generation.schemas import ContentType, QuestionsContent
from edusaarthi.features.generation.service import ContentGenerator
from edusaarthi.features.notification.schemas import DeliveryResult
from edusaarthi.features.scheduler.executor import (
    TaskExecutor,
    error_message,
    parse_recipients,
    resolve_content_type,
)
from edusaarthi.features.scheduler.exceptions import UnsupportedTaskTypeError
from edusaarthi.features.scheduler.models import ScheduledTaskStatus
from edusaarthi.features.scheduler.schemas import ExecutionOutcome


@pytest.fixture
def upload_dir(tmp_path):
    uploads = tmp_path / "uploads"
    uploads.mkdir()
    (uploads / "notes.txt").write_text("The ALU performs arithmetic.", encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_executor(session_factory, upload_dir, mock_ai_provider, mock_notifier):
    def _make(**overrides) -> TaskExecutor:
        options = {
            "extractor": TextExtractor(base_path=str(upload_dir)),
            "generator": ContentGenerator(mock_ai_provider),
            "notifier": mock_notifier,
            "activity_service": ActivityService(session_factory),
            "session_factory": session_factory,
            "timeout_seconds": 5,
        }
        options.update(overrides)
        return TaskExecutor(**options)

    return _make


class TestRecipients:
    """Recipient list parsing"""

    def test_trims_and_drops_empties(self):
        assert parse_recipients("a@x.com, , b@x.com ,") == ["a@x.com", "b@x.com"]

    @pytest.mark.parametrize("raw", ["", None, " , ,"])
    def test_no_recipients(self, raw):
        assert parse_recipients(raw) == []


class TestContentTypeResolution:

    def test_automation_generates_questions(self):
        assert resolve_content_type("automation") == ContentType.QUESTIONS
        assert resolve_content_type("question_generation") == ContentType.QUESTIONS

    def test_unknown_type(self):
        with pytest.raises(UnsupportedTaskTypeError):
            resolve_content_type("email_automation")

    def test_error_message_prefers_app_message(self):
        assert error_message(UnsupportedTaskTypeError("x")) == "Unsupported task type: x"
        assert error_message(RuntimeError()) == "RuntimeError"


class TestExecute:

    @pytest.mark.asyncio
    async def test_success_marks_completed(self, make_executor, create_task, get_task, mock_notifier):
        task = await create_task(recipient_emails="a@x.com, b@x.com")

        result = await make_executor().execute(task)

        assert result.outcome == ExecutionOutcome.COMPLETED
        assert result.content_type == "questions"
        stored = await get_task(task.id)
        assert stored.status == ScheduledTaskStatus.COMPLETED.value
        assert stored.error is None
        assert mock_notifier.send.await_count == 2
        subject = mock_notifier.send.await_args_list[0].args[1]
        assert subject == "Edusaarthi Scheduled Task: Scheduled: Generated Questions"

    @pytest.mark.asyncio
    async def test_missing_file_fails_without_generation(self, make_executor, create_task, get_task):
        generator = AsyncMock()
        task = await create_task(file_path="uploads/missing.pdf")

        result = await make_executor(generator=generator).execute(task)

        assert result.outcome == ExecutionOutcome.FAILED
        stored = await get_task(task.id)
        assert stored.status == ScheduledTaskStatus.FAILED.value
        assert stored.error
        assert "File not found" in stored.error
        generator.generate.assert_not_called()

    @pytest.mark.asyncio
    async def test_throwing_notifier_still_completes(self, make_executor, create_task, get_task):
        notifier = AsyncMock()
        notifier.send.side_effect = RuntimeError("smtp exploded")
        task = await create_task(recipient_emails="a@x.com, , b@x.com ,")

        result = await make_executor(notifier=notifier).execute(task)

        assert result.outcome == ExecutionOutcome.COMPLETED
        assert result.delivery.failed == 2
        assert [c.args[0] for c in notifier.send.await_args_list] == ["a@x.com", "b@x.com"]
        stored = await get_task(task.id)
        assert stored.status == ScheduledTaskStatus.COMPLETED.value

    @pytest.mark.asyncio
    async def test_delivery_report_counts(self, make_executor, create_task):
        notifier = AsyncMock()
        notifier.send.side_effect = [
            DeliveryResult(recipient="a@x.com", success=True),
            None,
        ]
        task = await create_task(recipient_emails="a@x.com,b@x.com")

        result = await make_executor(notifier=notifier).execute(task)

        assert (result.delivery.sent, result.delivery.skipped, result.delivery.failed) == (1, 1, 0)

    @pytest.mark.asyncio
    async def test_degraded_generation_still_completes(self, make_executor, create_task, get_task, mock_ai_provider):
        mock_ai_provider.generate_text.side_effect = RuntimeError("model offline")
        task = await create_task()

        result = await make_executor().execute(task)

        assert result.outcome == ExecutionOutcome.COMPLETED
        assert result.degraded is True
        stored = await get_task(task.id)
        assert stored.status == ScheduledTaskStatus.COMPLETED.value

    @pytest.mark.asyncio
    async def test_unsupported_task_type_fails(self, make_executor, create_task, get_task, mock_notifier):
        task = await create_task(task_type="email_automation")

        result = await make_executor().execute(task)

        assert result.outcome == ExecutionOutcome.FAILED
        stored = await get_task(task.id)
        assert stored.status == ScheduledTaskStatus.FAILED.value
        assert stored.error == "Unsupported task type: email_automation"
        mock_notifier.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_timeout_fails_task(self, make_executor, create_task, get_task):
        async def hang(*args, **kwargs):
            await asyncio.sleep(10)

        generator = AsyncMock()
        generator.generate.side_effect = hang
        task = await create_task()

        result = await make_executor(generator=generator, timeout_seconds=0.05).execute(task)

        assert result.outcome == ExecutionOutcome.FAILED
        stored = await get_task(task.id)
        assert stored.status == ScheduledTaskStatus.FAILED.value
        assert "timed out" in stored.error

    @pytest.mark.asyncio
    async def test_inner_timeout_error_keeps_its_message(self, make_executor, create_task, get_task):
        activity_service = AsyncMock()
        activity_service.create_activity.side_effect = TimeoutError("connection to db timed out")
        task = await create_task()

        result = await make_executor(activity_service=activity_service, timeout_seconds=600).execute(task)

        assert result.outcome == ExecutionOutcome.FAILED
        stored = await get_task(task.id)
        assert stored.status == ScheduledTaskStatus.FAILED.value
        assert stored.error == "connection to db timed out"

    @pytest.mark.asyncio
    async def test_activity_failure_fails_task(self, make_executor, create_task, get_task, mock_notifier):
        activity_service = AsyncMock()
        activity_service.create_activity.side_effect = RuntimeError("activity store down")
        task = await create_task()

        result = await make_executor(activity_service=activity_service).execute(task)

        assert result.outcome == ExecutionOutcome.FAILED
        stored = await get_task(task.id)
        assert stored.error == "activity store down"
        mock_notifier.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_lost_claim_is_skipped(self, make_executor, create_task, get_task, mock_ai_provider):
        task = await create_task(status=ScheduledTaskStatus.IN_PROGRESS.value)

        result = await make_executor().execute(task)

        assert result.outcome == ExecutionOutcome.SKIPPED
        mock_ai_provider.generate_text.assert_not_called()
        stored = await get_task(task.id)
        assert stored.status == ScheduledTaskStatus.IN_PROGRESS.value

    @pytest.mark.asyncio
    async def test_activity_records_generated_content(self, make_executor, create_task, session_factory):
        from edusaarthi.features.activity.repository import ActivityRepository

        task = await create_task(task_type="automation", original_file_name="Week 3 notes.txt")

        await make_executor().execute(task)

        async with session_factory() as session:
            activities = await ActivityRepository(session).get_user_activities(task.user_id)
        assert len(activities) == 1
        activity = activities[0]
        assert activity.title == "Scheduled: Generated Questions"
        assert activity.description == "AI-generated questions from Week 3 notes.txt"
        assert activity.type == "automation"
        assert activity.content["type"] == "questions"
        assert activity.content["data"] == ["What is a register?"]

    @pytest.mark.asyncio
    async def test_generator_receives_question_count(self, make_executor, create_task):
        generator = AsyncMock()
        generator.generate.return_value = QuestionsContent(data=["Q"])
        task = await create_task(question_count=7)

        await make_executor(generator=generator).execute(task)

        generator.generate.assert_awaited_once_with(
            ContentType.QUESTIONS, "The ALU performs arithmetic.", 7
        )

    def test_error_code_for_timeout(self):
        from edusaarthi.features.scheduler.exceptions import TaskTimeoutError

        assert TaskTimeoutError(1.5).error_code == ErrorCode.TASK_TIMEOUT
