"""
Core Exceptions Module
"""

from .base import AppException
from .codes import ErrorCode
from .schemas import ErrorResponse, ErrorDetail, ValidationErrorResponse

__all__ = [
    "AppException",
    "ErrorCode",
    "ErrorResponse",
    "ErrorDetail",
    "ValidationErrorResponse",
]
