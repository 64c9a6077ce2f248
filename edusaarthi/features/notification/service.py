"""
Notifier
Best-effort single recipient email delivery
"""

from typing import Optional

from edusaarthi.core.logging import get_logger
from edusaarthi.infrastructure.email.base import EmailTransport
from .schemas import DeliveryResult

logger = get_logger(__name__)


class Notifier:
    """
    Email notifier

    send() never raises. Missing credentials return None, transport failures
    return an unsuccessful DeliveryResult.
    """

    def __init__(self, transport: EmailTransport):
        self.transport = transport

    async def send(self, to: str, subject: str, html: str) -> Optional[DeliveryResult]:
        """
        Deliver one email

        Args:
            to: recipient address
            subject: subject line
            html: rendered HTML body

        Returns:
            Optional[DeliveryResult]: None when email is not configured
        """
        if not self.transport.is_configured:
            logger.warning("Email credentials not configured, skipping delivery", recipient=to)
            return None

        try:
            response = await self.transport.send_message(to, subject, html)
        except Exception as e:
            logger.error(
                "Email delivery failed",
                recipient=to,
                error=str(e),
                error_type=e.__class__.__name__,
            )
            return DeliveryResult(recipient=to, success=False, error=str(e) or e.__class__.__name__)

        logger.info("Email sent", recipient=to, response=response)
        return DeliveryResult(recipient=to, success=True, response=str(response) if response else None)
