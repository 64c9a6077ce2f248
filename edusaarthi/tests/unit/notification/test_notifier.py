"""
Notifier Tests
Best-effort delivery never raises
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from edusaarthi.features.notification.schemas import DeliveryReport, DeliveryResult
from edusaarthi.features.notification.service import Notifier


@pytest.fixture
def transport():
    transport = MagicMock()
    transport.is_configured = True
    transport.send_message = AsyncMock(return_value="250 2.0.0 OK")
    return transport


@pytest.mark.asyncio
async def test_send_success(transport):
    result = await Notifier(transport).send("a@x.com", "Subject", "<p>hi</p>")

    assert result == DeliveryResult(recipient="a@x.com", success=True, response="250 2.0.0 OK")
    transport.send_message.assert_awaited_once_with("a@x.com", "Subject", "<p>hi</p>")


@pytest.mark.asyncio
async def test_not_configured_returns_none(transport):
    transport.is_configured = False

    result = await Notifier(transport).send("a@x.com", "Subject", "<p>hi</p>")

    assert result is None
    transport.send_message.assert_not_called()


@pytest.mark.asyncio
async def test_transport_failure_is_swallowed(transport):
    transport.send_message.side_effect = ConnectionRefusedError("smtp down")

    result = await Notifier(transport).send("a@x.com", "Subject", "<p>hi</p>")

    assert result.success is False
    assert result.error == "smtp down"


def test_delivery_report_counts():
    report = DeliveryReport()
    report.record(DeliveryResult(recipient="a", success=True))
    report.record(DeliveryResult(recipient="b", success=False, error="x"))
    report.record(None)

    assert (report.sent, report.failed, report.skipped) == (1, 1, 1)
