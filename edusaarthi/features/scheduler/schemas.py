"""
Task Execution Schemas
"""

from typing import Optional
from enum import Enum

from pydantic import BaseModel, ConfigDict

from edusaarthi.features.notification.schemas import DeliveryReport


class ExecutionOutcome(str, Enum):
    """Result of one executor run"""
    COMPLETED = "completed"
    FAILED = "failed"
    SKIPPED = "skipped"  # claim lost to another executor


class TaskResult(BaseModel):
    """
    Task execution result

    Attributes:
        task_id: executed task id (string)
        outcome: terminal outcome of this run
        error: failure message when failed
        content_type: generated content type when generation ran
        degraded: generator returned a placeholder
        delivery: per-recipient delivery counts
    """
    model_config = ConfigDict(use_enum_values=True)

    task_id: str
    outcome: ExecutionOutcome
    error: Optional[str] = None
    content_type: Optional[str] = None
    degraded: bool = False
    delivery: Optional[DeliveryReport] = None
