"""
Error Code Definitions
"""

from enum import Enum


class ErrorCode(str, Enum):
    """
    Application error codes

    Conventions:
    - VAL_xxx: validation errors (400, 422)
    - TASK_xxx: scheduled task execution errors
    - SYS_xxx: system errors (500)
    """

    # ==================== Validation (VAL_xxx) ====================
    VAL_INVALID_INPUT = "VAL_001"
    """Input data is invalid"""

    # ==================== Scheduled Tasks (TASK_xxx) ====================
    TASK_FILE_NOT_FOUND = "TASK_001"
    """Source document is missing at execution time"""

    TASK_EXTRACTION_FAILED = "TASK_002"
    """Text could not be extracted from the source document"""

    TASK_EMPTY_OR_UNREADABLE = "TASK_003"
    """Source document has no readable text"""

    TASK_UNSUPPORTED_TYPE = "TASK_004"
    """Task type has no generation operation"""

    TASK_TIMEOUT = "TASK_005"
    """Task execution exceeded its time budget"""

    TASK_EXECUTION_FAILED = "TASK_006"
    """Unhandled error during task execution"""

    # ==================== System (SYS_xxx) ====================
    SYS_INTERNAL_ERROR = "SYS_001"
    """Internal server error"""

