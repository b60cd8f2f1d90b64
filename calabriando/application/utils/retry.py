from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Sequence, TypeVar

T = TypeVar("T")

RETRY_DELAYS: tuple[float, ...] = (1.0, 2.0, 5.0)

logger = logging.getLogger(__name__)


async def retry_operation(
    operation: Callable[[], Awaitable[T]],
    delays: Sequence[float] = RETRY_DELAYS,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    label: str | None = None,
) -> T:
    """
    Run `operation`, retrying on failure with a fixed delay schedule.

    One initial attempt plus one retry per entry in `delays`. The last
    failure is re-raised unchanged.
    """
    attempt = 0
    while True:
        try:
            return await operation()
        except Exception as e:
            if attempt >= len(delays):
                raise
            delay = delays[attempt]
            attempt += 1
            logger.warning(
                "Operation failed, retrying in %ss",
                delay,
                extra={"table": label, "attempt": attempt, "error": str(e)},
            )
            await sleep(delay)
