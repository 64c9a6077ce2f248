"""
Tracing & Logging Utilities
Step tracing for the task pipeline
"""

import time
import asyncio
import functools
import contextvars
from typing import Optional

from edusaarthi.core.logging import get_logger

logger = get_logger("edusaarthi.trace")

# nesting depth of traced steps in the current task
_call_depth = contextvars.ContextVar("call_depth", default=0)


def _tree_prefix(depth: int) -> str:
    if depth == 0:
        return ""
    return "│   " * (depth - 1) + "├── "


def log_process(
    step: str,
    desc: Optional[str] = None,
):
    """
    Log start, completion, failure and duration of an async pipeline step

    Nested steps are indented as a tree. Failures are logged and re-raised.

    Usage:
        @log_process(step="Extract Text", desc="PDF text extraction")
        async def extract(...): ...
    """
    label = desc or step

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            depth = _call_depth.get()
            token = _call_depth.set(depth + 1)
            prefix = _tree_prefix(depth)
            log = logger.bind(process_step=step, func_name=func.__qualname__, depth=depth)
            started = time.perf_counter()

            log.debug(f"{prefix}▶ Start: {label}")
            try:
                result = await func(*args, **kwargs)
            except asyncio.CancelledError:
                log.warning(
                    f"{prefix}■ Cancelled: {label}",
                    duration_s=round(time.perf_counter() - started, 3),
                )
                raise
            except Exception as e:
                log.error(
                    f"{prefix}✕ Failed: {label}",
                    duration_s=round(time.perf_counter() - started, 3),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise
            finally:
                _call_depth.reset(token)

            log.info(
                f"{prefix}✓ Completed: {label}",
                duration_s=round(time.perf_counter() - started, 3),
            )
            return result

        return wrapper
    return decorator
