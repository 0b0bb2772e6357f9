"""Trip repository port."""

from typing import Any, Protocol

from resrobot_departures.domain.models.route import Route


class TripRepository(Protocol):
    """Port for retrieving raw trip records for a route."""

    async def get_trips(self, route: Route) -> list[dict[str, Any]]:
        """Get the raw trip records between the route's stations.

        Raises:
            TripFetchError: On network failure, non-2xx status or malformed JSON.
        """
        ...
