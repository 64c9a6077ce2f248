"""
SMTP Transport Tests
"""

import pytest
from unittest.mock import AsyncMock, patch

from edusaarthi.infrastructure.email.providers.smtp import SMTPEmailTransport


def test_is_configured_requires_credentials():
    assert SMTPEmailTransport(username="u@x.com", password="secret").is_configured
    assert not SMTPEmailTransport(username="", password="").is_configured


def test_is_configured_falls_back_to_settings_credentials():
    with patch("edusaarthi.infrastructure.email.providers.smtp.settings") as mock_settings:
        mock_settings.email_user = "u@x.com"
        mock_settings.email_pass = None

        assert not SMTPEmailTransport().is_configured

        mock_settings.email_pass = "secret"

        assert SMTPEmailTransport().is_configured


def test_sender_defaults_to_username():
    transport = SMTPEmailTransport(username="u@x.com", password="secret")

    message = transport._build_message("to@x.com", "Hello", "<b>Body</b>")

    assert message["From"] == "u@x.com"
    assert message["To"] == "to@x.com"
    assert message["Subject"] == "Hello"
    html_part = message.get_body(preferencelist=("html",))
    assert "<b>Body</b>" in html_part.get_content()


@pytest.mark.asyncio
async def test_send_message_uses_aiosmtplib():
    transport = SMTPEmailTransport(
        username="u@x.com",
        password="secret",
        hostname="smtp.test",
        port=2525,
        start_tls=False,
        timeout=5,
    )

    with patch(
        "edusaarthi.infrastructure.email.providers.smtp.aiosmtplib.send",
        new_callable=AsyncMock,
        return_value=({}, "OK"),
    ) as send:
        response = await transport.send_message("to@x.com", "Hello", "<p>x</p>")

    assert response == "OK"
    kwargs = send.await_args.kwargs
    assert kwargs["hostname"] == "smtp.test"
    assert kwargs["port"] == 2525
    assert kwargs["username"] == "u@x.com"
    assert kwargs["start_tls"] is False
