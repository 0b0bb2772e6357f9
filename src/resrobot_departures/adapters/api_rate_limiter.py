"""Minimum-delay throttle for outgoing ResRobot requests.

All route fetches of a refresh cycle are dispatched at once; a shared
limiter spaces them out so a board with many routes does not burst the
per-minute quota of the API key. A delay of 0 turns throttling off.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import ClassVar

logger = logging.getLogger(__name__)


class ApiRateLimiter:
    """Serializes requests to one API with at least ``min_delay_seconds`` between them."""

    _instances: ClassVar[dict[str, ApiRateLimiter]] = {}
    _registry_lock: ClassVar[asyncio.Lock | None] = None

    def __init__(self, api_name: str, min_delay_seconds: float = 0.0) -> None:
        """Initialize the limiter.

        Args:
            api_name: Name used for the shared registry and in log messages.
            min_delay_seconds: Minimum spacing between two requests; 0 disables waiting.
        """
        self.api_name = api_name
        self.min_delay_seconds = min_delay_seconds
        self.request_count = 0
        self.total_wait_seconds = 0.0
        self._last_request_at: float | None = None
        self._lock = asyncio.Lock()

    @property
    def enabled(self) -> bool:
        """Whether requests are spaced out at all."""
        return self.min_delay_seconds > 0

    @classmethod
    async def get_instance(cls, api_name: str, min_delay_seconds: float = 0.0) -> ApiRateLimiter:
        """Return the limiter shared by every client of ``api_name``.

        The delay only applies when the limiter is first created.
        """
        if cls._registry_lock is None:
            cls._registry_lock = asyncio.Lock()

        async with cls._registry_lock:
            limiter = cls._instances.get(api_name)
            if limiter is None:
                limiter = cls(api_name, min_delay_seconds)
                cls._instances[api_name] = limiter
                if limiter.enabled:
                    logger.info(f"{api_name}: spacing requests by {min_delay_seconds}s")
            return limiter

    @classmethod
    def reset_instances(cls) -> None:
        """Forget all shared limiters (each event loop needs fresh locks)."""
        cls._instances.clear()
        cls._registry_lock = None

    def _seconds_to_wait(self, now: float) -> float:
        if self._last_request_at is None:
            return 0.0
        return max(0.0, self.min_delay_seconds - (now - self._last_request_at))

    async def acquire(self) -> None:
        """Wait until the next request may be sent."""
        self.request_count += 1
        if not self.enabled:
            return

        async with self._lock:
            wait = self._seconds_to_wait(time.monotonic())
            if wait > 0:
                logger.debug(f"{self.api_name}: delaying request by {wait:.2f}s")
                self.total_wait_seconds += wait
                await asyncio.sleep(wait)
            self._last_request_at = time.monotonic()

    async def __aenter__(self) -> ApiRateLimiter:
        await self.acquire()
        return self

    async def __aexit__(
        self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object
    ) -> None:
        return None
