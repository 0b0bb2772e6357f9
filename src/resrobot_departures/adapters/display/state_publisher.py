"""Publisher keeping the display state and notifying its listeners."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime

from resrobot_departures.domain.contracts.departure_publisher import DeparturePublisherProtocol
from resrobot_departures.domain.models import (
    STATUS_NEEDS_CONFIGURATION,
    STATUS_READY,
    Departure,
    DisplayState,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[DisplayState], Awaitable[None]]


class DisplayStatePublisher(DeparturePublisherProtocol):
    """Stores the latest published departures and pushes them to subscribers."""

    def __init__(self, display_state: DisplayState | None = None) -> None:
        """Initialize the publisher.

        Args:
            display_state: State instance to update; a fresh one when omitted.
        """
        self.display_state = display_state or DisplayState()
        self._listeners: list[StateListener] = []

    def subscribe(self, listener: StateListener) -> None:
        """Register an async callback invoked after every publish."""
        self._listeners.append(listener)

    async def publish_departures(self, departures: list[Departure]) -> None:
        """Replace the shown departures and notify listeners."""
        self.display_state.departures = list(departures)
        self.display_state.last_update = datetime.now(UTC)
        self.display_state.status = STATUS_READY
        logger.debug(f"Published {len(departures)} departure(s)")
        await self._notify()

    async def publish_needs_configuration(self) -> None:
        """Switch the display to the static needs-configuration state."""
        self.display_state.departures = []
        self.display_state.status = STATUS_NEEDS_CONFIGURATION
        await self._notify()

    async def _notify(self) -> None:
        for listener in self._listeners:
            try:
                await listener(self.display_state)
            except Exception as e:
                logger.error(f"Display listener failed: {e}", exc_info=True)
