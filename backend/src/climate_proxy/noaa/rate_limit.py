from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import Protocol

DEFAULT_DELAY_SECONDS = 0.25

Sleeper = Callable[[float], Awaitable[None]]
Clock = Callable[[], float]


class RateLimiter(Protocol):
    async def wait(self) -> None: ...


class FixedDelayRateLimiter:
    """Keeps consecutive upstream calls at least ``delay_seconds`` apart.

    Shared by every fetch made through one client, so concurrent fetches
    queue behind each other instead of doubling the request rate.
    """

    def __init__(
        self,
        delay_seconds: float = DEFAULT_DELAY_SECONDS,
        clock: Clock = time.monotonic,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        if delay_seconds < 0:
            raise ValueError("delay_seconds must not be negative")
        self.delay_seconds = delay_seconds
        self._clock = clock
        self._sleep = sleep
        self._lock = asyncio.Lock()
        self._last_call: float | None = None

    async def wait(self) -> None:
        async with self._lock:
            if self._last_call is not None:
                remaining = self.delay_seconds - (self._clock() - self._last_call)
                if remaining > 0:
                    await self._sleep(remaining)
            self._last_call = self._clock()


class NoDelayRateLimiter:
    async def wait(self) -> None:
        return None
