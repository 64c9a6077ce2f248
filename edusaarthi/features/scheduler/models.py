"""
Scheduled Task Domain Models
Persisted queue of deferred document processing work
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import String, DateTime, Integer, Text, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from edusaarthi.core.database.base import Base


class TaskType(str, Enum):
    """Requested kind of automation"""
    QUESTION_GENERATION = "question_generation"
    QUIZ = "quiz"
    FILL_IN_BLANKS = "fill_in_blanks"
    TRUE_FALSE = "true_false"
    SUBJECTIVE = "subjective"
    AUTOMATION = "automation"


class ScheduledTaskStatus(str, Enum):
    """Lifecycle state"""
    PENDING = "pending"  # initial
    IN_PROGRESS = "in_progress"  # claimed by the executor
    COMPLETED = "completed"  # terminal
    FAILED = "failed"  # terminal


class ScheduledTask(Base):
    """
    Scheduled task model

    Eligible for execution iff status is pending and scheduled_date <= now.
    Created by the task creation API, mutated only by the executor.
    """
    __tablename__ = "scheduled_tasks"
    __table_args__ = (
        Index("ix_scheduled_tasks_status_scheduled_date", "status", "scheduled_date"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # Owner (opaque)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)

    # Payload
    file_path: Mapped[str] = mapped_column(String(1024), nullable=False)
    original_file_name: Mapped[str] = mapped_column(String(512), nullable=False)
    task_type: Mapped[str] = mapped_column(String(50), nullable=False)
    question_count: Mapped[int] = mapped_column(Integer, default=5, nullable=False)
    recipient_emails: Mapped[str] = mapped_column(Text, nullable=False)  # comma separated

    # Scheduling
    scheduled_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    # Lifecycle
    status: Mapped[str] = mapped_column(
        String(20),
        default=ScheduledTaskStatus.PENDING.value,
        nullable=False,
    )
    error: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    @property
    def is_terminal(self) -> bool:
        return self.status in (
            ScheduledTaskStatus.COMPLETED.value,
            ScheduledTaskStatus.FAILED.value,
        )

    def __repr__(self) -> str:
        return (
            f"<ScheduledTask(id={self.id}, task_type={self.task_type}, "
            f"status={self.status}, scheduled_date={self.scheduled_date})>"
        )
