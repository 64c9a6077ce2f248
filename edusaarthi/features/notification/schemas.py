"""
Notification Schemas
Structured delivery outcomes
"""

from typing import Optional

from pydantic import BaseModel


class DeliveryResult(BaseModel):
    """
    Outcome of one delivery attempt

    Attributes:
        recipient: target address
        success: transport accepted the message
        response: transport response on success
        error: failure message on failure
    """
    recipient: str
    success: bool
    response: Optional[str] = None
    error: Optional[str] = None


class DeliveryReport(BaseModel):
    """Per-task delivery summary"""
    sent: int = 0
    failed: int = 0
    skipped: int = 0

    def record(self, result: Optional[DeliveryResult]) -> None:
        if result is None:
            self.skipped += 1
        elif result.success:
            self.sent += 1
        else:
            self.failed += 1
