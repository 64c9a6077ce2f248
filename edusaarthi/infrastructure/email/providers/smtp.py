"""
SMTP Email Transport
aiosmtplib based delivery
"""

from email.message import EmailMessage
from typing import Optional

import aiosmtplib

from ..base import EmailTransport
from ....core.config import settings


class SMTPEmailTransport(EmailTransport):
    """
    SMTP transport (Gmail by default)
    """

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        sender: Optional[str] = None,
        hostname: Optional[str] = None,
        port: Optional[int] = None,
        start_tls: Optional[bool] = None,
        timeout: Optional[float] = None,
    ):
        self.username = username or settings.email_user
        self.password = password or settings.email_pass
        self.sender = sender or settings.email_from or self.username
        self.hostname = hostname or settings.smtp_host
        self.port = port or settings.smtp_port
        self.start_tls = settings.smtp_start_tls if start_tls is None else start_tls
        self.timeout = timeout or settings.smtp_timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.username and self.password)

    def _build_message(self, to: str, subject: str, html: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message.set_content("This message requires an HTML capable email client.")
        message.add_alternative(html, subtype="html")
        return message

    async def send_message(self, to: str, subject: str, html: str) -> str:
        message = self._build_message(to, subject, html)
        _errors, response = await aiosmtplib.send(
            message,
            hostname=self.hostname,
            port=self.port,
            username=self.username,
            password=self.password,
            start_tls=self.start_tls,
            timeout=self.timeout,
        )
        return response
