"""
Email Transport Abstract Base Class
"""

from abc import ABC, abstractmethod


class EmailTransport(ABC):
    """
    Email transport interface

    Delivers one message to one recipient. Implementations raise on
    transport failure; the notification service decides what to do with it.
    """

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """True when credentials are available"""

    @abstractmethod
    async def send_message(self, to: str, subject: str, html: str) -> str:
        """
        Send an HTML email

        Args:
            to: recipient address
            subject: subject line
            html: HTML body

        Returns:
            str: server response for the accepted message
        """
