"""
Base Exception Classes
"""

from enum import Enum
from typing import Optional, Dict, Any
from fastapi import status


class AppException(Exception):
    """
    Application base exception

    Base class of every custom exception
    """

    def __init__(
        self,
        error_code: str,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            error_code: error code (e.g. TASK_001)
            message: human readable error message
            status_code: HTTP status code
            details: extra error information (optional)
        """
        self.error_code = error_code.value if isinstance(error_code, Enum) else error_code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"error_code={self.error_code!r}, "
            f"message={self.message!r}, "
            f"status_code={self.status_code})"
        )

