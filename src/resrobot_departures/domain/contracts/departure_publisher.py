"""Protocol for publishing departures to the display layer."""

from typing import Protocol

from resrobot_departures.domain.models.departure import Departure


class DeparturePublisherProtocol(Protocol):
    """One-way push of the sorted departure list to the display layer."""

    async def publish_departures(self, departures: list[Departure]) -> None:
        """Publish a non-empty, timestamp-sorted list of departures.

        Args:
            departures: The departures to show.
        """
        ...

    async def publish_needs_configuration(self) -> None:
        """Tell the display that no routes are configured."""
        ...
