"""
Scheduled Task Exceptions
Failure taxonomy of the task execution pipeline
"""

from typing import Any, Dict, Optional

from edusaarthi.core.exceptions import AppException, ErrorCode


class TaskExecutionError(AppException):
    """Base of every error that moves a task to failed"""

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCode.TASK_EXECUTION_FAILED,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(error_code=error_code, message=message, details=details)


class TaskFileNotFoundError(TaskExecutionError):
    """Source document missing at execution time"""

    def __init__(self, path: str):
        super().__init__(
            message=f"File not found: {path}",
            error_code=ErrorCode.TASK_FILE_NOT_FOUND,
            details={"path": path},
        )


class ExtractionFailedError(TaskExecutionError):
    """Source document could not be read"""

    def __init__(
        self,
        reason: str,
        path: Optional[str] = None,
        error_code: str = ErrorCode.TASK_EXTRACTION_FAILED,
    ):
        super().__init__(
            message=f"Failed to extract text: {reason}",
            error_code=error_code,
            details={"path": path} if path else None,
        )


class EmptyOrUnreadableError(ExtractionFailedError):
    """Source document contains no readable text"""

    def __init__(self, path: Optional[str] = None):
        super().__init__(
            reason="document is empty or unreadable",
            path=path,
            error_code=ErrorCode.TASK_EMPTY_OR_UNREADABLE,
        )


class UnsupportedTaskTypeError(TaskExecutionError):
    """Task type has no generation operation"""

    def __init__(self, task_type: str):
        super().__init__(
            message=f"Unsupported task type: {task_type}",
            error_code=ErrorCode.TASK_UNSUPPORTED_TYPE,
            details={"task_type": task_type},
        )


class TaskTimeoutError(TaskExecutionError):
    """Execution exceeded its time budget"""

    def __init__(self, timeout_seconds: float):
        super().__init__(
            message=f"Task execution timed out after {timeout_seconds:g} seconds",
            error_code=ErrorCode.TASK_TIMEOUT,
            details={"timeout_seconds": timeout_seconds},
        )
