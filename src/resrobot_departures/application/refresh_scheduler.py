"""Refresh scheduler: decides when to fetch, merges route results and re-arms itself."""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from resrobot_departures.application.departure_normalizer import DepartureNormalizer
from resrobot_departures.domain.contracts.refresh_scheduler import RefreshSchedulerProtocol
from resrobot_departures.domain.models import Departure, ErrorDetails

if TYPE_CHECKING:
    from resrobot_departures.domain.contracts.departure_publisher import (
        DeparturePublisherProtocol,
    )
    from resrobot_departures.domain.models import RefreshSettings, Route
    from resrobot_departures.domain.ports import TripRepository

logger = logging.getLogger(__name__)

# Never poll less often than this, however far away the next departure is.
MAX_UPDATE_DELAY = timedelta(hours=1)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def extract_error_details(error: Exception) -> ErrorDetails:
    """Extract HTTP status code and error reason from exception."""
    status_code = getattr(error, "status_code", None) or getattr(error, "status", None)
    if not isinstance(status_code, int):
        # Format: "ResRobot API returned status 502: ..."
        status_match = re.search(r"status (\d{3})", str(error))
        status_code = int(status_match.group(1)) if status_match else None

    if status_code == 429:
        reason = "Rate limit exceeded"
    elif status_code == 502:
        reason = "Bad gateway (server error)"
    elif status_code == 503:
        reason = "Service unavailable"
    elif status_code == 504:
        reason = "Gateway timeout"
    elif status_code is not None:
        reason = f"HTTP {status_code}"
    elif isinstance(error, TimeoutError):
        reason = "Request timed out"
    else:
        reason = "Unknown error"

    return ErrorDetails(status_code=status_code, reason=reason)


@dataclass
class SchedulerState:
    """Mutable state owned by one RefreshScheduler."""

    departures: list[Departure] = field(default_factory=list)
    timer: asyncio.TimerHandle | None = None
    cycle_task: asyncio.Task[list[Departure]] | None = None
    next_delay: timedelta | None = None
    fetch_count: int = 0


class RefreshScheduler(RefreshSchedulerProtocol):
    """Polls every configured route and republishes the merged departure list."""

    def __init__(
        self,
        repository: TripRepository,
        publisher: DeparturePublisherProtocol,
        routes: list[Route],
        settings: RefreshSettings,
        normalizer: DepartureNormalizer | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the scheduler.

        Args:
            repository: Source of raw trip records per route.
            publisher: Display boundary receiving the sorted departure list.
            routes: Origin/destination pairs to poll.
            settings: Update interval, cutoff offset and cache threshold.
            normalizer: Trip normalizer; built from settings when omitted.
            clock: Returns the current aware datetime.
        """
        self.repository = repository
        self.publisher = publisher
        self.routes = list(routes)
        self.settings = settings
        self.normalizer = normalizer or DepartureNormalizer(settings)
        self._clock = clock
        self.state = SchedulerState()
        self._stopped = asyncio.Event()

    @property
    def departures(self) -> list[Departure]:
        """The current working departure list."""
        return self.state.departures

    async def start(self) -> None:
        """Start polling, or report missing configuration when no routes are set."""
        self._stopped.clear()
        if not self.routes:
            logger.warning("No routes configured, not polling")
            await self.publisher.publish_needs_configuration()
            return

        logger.info(
            f"Refresh scheduler started for {len(self.routes)} route(s), "
            f"base interval {self.settings.update_interval}"
        )
        await self.refresh_cycle()

    async def stop(self) -> None:
        """Cancel the pending timer and wait for any in-flight cycle to finish cancelling."""
        self._cancel_timer()
        task = self.state.cycle_task
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                logger.info("Refresh cycle cancelled")
        self.state.cycle_task = None
        self._stopped.set()
        logger.info("Refresh scheduler stopped")

    async def run_forever(self) -> None:
        """Start and keep polling until stop() is called."""
        await self.start()
        if self.routes:
            await self._stopped.wait()

    async def refresh_cycle(self) -> list[Departure]:
        """Run one refresh cycle.

        Reuses held departures when more than ``maximum_entries`` remain
        beyond the cutoff, otherwise fetches every route concurrently and
        merges the results once all of them have settled. Always re-arms
        the update timer; publishes only a non-empty list.

        Returns:
            The new working departure list.
        """
        cutoff = self._clock() + self.settings.skip
        still_valid = [d for d in self.state.departures if d.timestamp > cutoff]

        if len(still_valid) > self.settings.maximum_entries:
            logger.info(f"Reusing {len(still_valid)} cached departure(s)")
            departures = still_valid
        else:
            logger.info(f"Fetching new departure data for {len(self.routes)} route(s)")
            self.state.departures = []
            self.state.fetch_count += 1
            per_route = await asyncio.gather(*(self._fetch_route(route) for route in self.routes))
            departures = self.normalizer.merge(per_route)

        self.state.departures = departures
        self.schedule_update(self.schedule_next(departures))

        if departures:
            await self.publisher.publish_departures(list(departures))
        else:
            logger.info("No usable departures this cycle, nothing published")
        return departures

    def schedule_next(self, departures: list[Departure]) -> timedelta:
        """Delay until the next cycle.

        Aims at the moment the first departure passes the cutoff, clamped
        between the base update interval and one hour.
        """
        if not departures:
            return self.settings.update_interval
        raw_delay = departures[0].timestamp - (self._clock() + self.settings.skip)
        return max(min(raw_delay, MAX_UPDATE_DELAY), self.settings.update_interval)

    def schedule_update(self, delay: timedelta) -> None:
        """Arm the single update timer, replacing any pending one."""
        self._cancel_timer()
        loop = asyncio.get_running_loop()
        self.state.next_delay = delay
        self.state.timer = loop.call_later(delay.total_seconds(), self._on_timer)
        logger.info(f"Next update in {delay}")

    def _cancel_timer(self) -> None:
        if self.state.timer is not None:
            self.state.timer.cancel()
            self.state.timer = None

    def _on_timer(self) -> None:
        self.state.timer = None
        self.state.cycle_task = asyncio.create_task(self.refresh_cycle())

    async def _fetch_route(self, route: Route) -> list[Departure]:
        """Fetch and normalize one route. Failures contribute no departures."""
        try:
            raw_trips = await self.repository.get_trips(route)
        except Exception as e:
            error_details = extract_error_details(e)
            logger.error(
                f"Failed to fetch trips {route.from_id} -> {route.to_id}: "
                f"{error_details.describe()}, error: {e}"
            )
            if error_details.is_rate_limited:
                logger.warning(
                    f"Rate limit (429) detected for {route.from_id} -> {route.to_id} - "
                    "consider raising update_interval_seconds"
                )
            return []

        # Evaluated at response time so slow responses cannot sneak in stale departures.
        departures = self.normalizer.normalize(raw_trips, self.routes, self._clock())
        logger.debug(
            f"Route {route.from_id} -> {route.to_id}: "
            f"{len(departures)} of {len(raw_trips)} trip(s) accepted"
        )
        return departures
