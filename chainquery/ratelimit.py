"""
Outbound request gate shared by every action.

Two independent limits apply, the stricter one wins:
- sliding window: at most `max_requests` admissions in any trailing
  `window_seconds`
- spacing: at least `min_interval_seconds` between consecutive admissions

acquire() never fails, it only delays. There is no cap on total wait.

One RateLimiter is built by the plugin composition root and passed to
each action. Clock and sleep are injectable so tests can drive time
deterministically.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections import deque
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)

MAX_REQUESTS = 30
WINDOW_SECONDS = 60.0
MIN_INTERVAL_SECONDS = 2.0


class RateLimiter:
    """Sliding-window + minimum-spacing limiter for provider calls."""

    def __init__(
        self,
        max_requests: int = MAX_REQUESTS,
        window_seconds: float = WINDOW_SECONDS,
        min_interval_seconds: float = MIN_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.min_interval_seconds = min_interval_seconds
        self._clock = clock
        self._sleep = sleep
        self._timestamps: deque[float] = deque()
        self._last_request: float | None = None
        self._lock = asyncio.Lock()

    @property
    def last_request_time(self) -> float | None:
        return self._last_request

    @property
    def request_timestamps(self) -> list[float]:
        return list(self._timestamps)

    async def acquire(self) -> None:
        """Wait until a provider call is permitted, then record it."""
        async with self._lock:
            while True:
                now = self._clock()
                self._prune(now)
                if len(self._timestamps) < self.max_requests:
                    break
                wait = self.window_seconds - (now - self._timestamps[0])
                logger.warning("Rate limit reached, waiting %.3fs", wait)
                await self._sleep(wait)

            if self._last_request is not None:
                since_last = now - self._last_request
                if since_last < self.min_interval_seconds:
                    wait = self.min_interval_seconds - since_last
                    logger.debug("Waiting %.3fs for rate limit interval", wait)
                    await self._sleep(wait)

            admitted = self._clock()
            if self._last_request is not None and admitted < self._last_request:
                admitted = self._last_request
            self._last_request = admitted
            self._timestamps.append(admitted)

    def _prune(self, now: float) -> None:
        """Drop admissions that have left the trailing window."""
        while self._timestamps and now - self._timestamps[0] >= self.window_seconds:
            self._timestamps.popleft()
