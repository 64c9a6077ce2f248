"""
Error Response Schemas
"""

from typing import Optional, Dict, Any, List
from pydantic import BaseModel, Field
from datetime import datetime


class ErrorDetail(BaseModel):
    """Single error detail"""

    field: Optional[str] = Field(None, description="Field that caused the error")
    message: str = Field(..., description="Error message")
    code: Optional[str] = Field(None, description="Detailed error code")


class ErrorResponse(BaseModel):
    """
    Standard error response

    Every API error is returned in this shape.
    """

    error_code: str = Field(..., description="Error code (e.g. TASK_001)")
    message: str = Field(..., description="Human readable error message")
    status_code: int = Field(..., description="HTTP status code")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Time of the error"
    )
    request_id: Optional[str] = Field(None, description="Request trace ID")
    path: Optional[str] = Field(None, description="Request path")
    details: Optional[Dict[str, Any]] = Field(
        None, description="Extra error information (optional)"
    )


class ValidationErrorResponse(BaseModel):
    """Validation error response (422)"""

    error_code: str = Field(default="VAL_001", description="Error code")
    message: str = Field(default="Input validation failed", description="Error message")
    status_code: int = Field(default=422, description="HTTP status code")
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    request_id: Optional[str] = Field(None, description="Request trace ID")
    path: Optional[str] = Field(None, description="Request path")
    errors: List[ErrorDetail] = Field(..., description="Validation errors")
