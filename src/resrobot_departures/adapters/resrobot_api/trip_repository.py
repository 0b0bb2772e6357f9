"""ResRobot trip repository adapter using the v2 ``trip`` endpoint."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from resrobot_departures.adapters.api_rate_limiter import ApiRateLimiter
from resrobot_departures.adapters.api_request_logger import log_api_request
from resrobot_departures.adapters.resrobot_api.constants import DEFAULT_HEADERS, RATE_LIMITER_NAME
from resrobot_departures.adapters.resrobot_api.trip_query import build_trip_params
from resrobot_departures.domain.models import Route, TripFetchError
from resrobot_departures.domain.ports.trip_repository import TripRepository

if TYPE_CHECKING:
    from resrobot_departures.adapters.config.app_config import AppConfig

logger = logging.getLogger(__name__)


class ResRobotTripRepository(TripRepository):
    """Adapter fetching raw trip records from ResRobot."""

    def __init__(self, session: aiohttp.ClientSession, config: "AppConfig") -> None:
        """Initialize with a shared aiohttp session.

        Args:
            session: ClientSession reused for every request.
            config: Application configuration (endpoint, key, transport types, timeout).
        """
        self._session = session
        self._api_base = config.api_base
        self._api_key = config.api_key
        self._transport_types = list(config.transport_types)
        self._timeout = aiohttp.ClientTimeout(total=config.api_timeout)
        self._min_request_delay = config.min_request_delay_seconds
        self._rate_limiter: ApiRateLimiter | None = None

    async def _get_rate_limiter(self) -> ApiRateLimiter:
        """Get the shared rate limiter for the ResRobot API."""
        if self._rate_limiter is None:
            self._rate_limiter = await ApiRateLimiter.get_instance(
                RATE_LIMITER_NAME, self._min_request_delay
            )
        return self._rate_limiter

    async def get_trips(self, route: Route) -> list[dict[str, Any]]:
        """Get the raw trip records between the route's stations.

        Raises:
            TripFetchError: On network failure, timeout, non-200 status,
                API error payload or malformed JSON.
        """
        params = build_trip_params(self._api_key, route, self._transport_types)
        log_api_request("GET", self._api_base, params=params)

        rate_limiter = await self._get_rate_limiter()
        async with rate_limiter:
            try:
                async with self._session.get(
                    self._api_base,
                    params=params,
                    headers=DEFAULT_HEADERS,
                    timeout=self._timeout,
                ) as response:
                    if response.status != 200:
                        response_text = await response.text()
                        raise TripFetchError(
                            f"ResRobot API returned status {response.status}: "
                            f"{response_text[:200]}",
                            status_code=response.status,
                        )
                    data = await response.json(content_type=None)
            except aiohttp.ClientError as e:
                raise TripFetchError(f"ResRobot request failed: {e}") from e
            except asyncio.TimeoutError as e:
                raise TripFetchError("ResRobot request timed out") from e
            except ValueError as e:
                raise TripFetchError(f"ResRobot returned malformed JSON: {e}") from e

        return self._extract_trips(data)

    @staticmethod
    def _extract_trips(data: Any) -> list[dict[str, Any]]:
        """Pull the trip list out of a decoded response.

        A missing ``Trip`` key means no connections were found.
        """
        if not isinstance(data, dict):
            raise TripFetchError(f"Unexpected ResRobot response type: {type(data).__name__}")

        if "errorCode" in data:
            raise TripFetchError(
                f"ResRobot API error {data.get('errorCode')}: {data.get('errorText', '')}"
            )

        trips = data.get("Trip", [])
        if isinstance(trips, dict):
            return [trips]
        if not isinstance(trips, list):
            logger.warning(f"Ignoring unexpected 'Trip' value of type {type(trips).__name__}")
            return []
        return trips
