"""
log_process Decorator Tests
"""

import pytest

from edusaarthi.core.logging import configure_logging
from edusaarthi.core.utils.trace import log_process


@log_process(step="Double", desc="double a number")
async def double(value: int) -> int:
    return value * 2


@log_process(step="Explode")
async def explode():
    raise ValueError("nope")


@pytest.mark.asyncio
async def test_returns_wrapped_result():
    configure_logging()
    assert await double(21) == 42
    assert double.__name__ == "double"


@pytest.mark.asyncio
async def test_reraises_failures():
    with pytest.raises(ValueError, match="nope"):
        await explode()
