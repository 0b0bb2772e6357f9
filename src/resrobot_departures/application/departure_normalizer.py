"""Normalization of raw ResRobot trip records into departures."""

import logging
from collections.abc import Iterable
from datetime import UTC, datetime, tzinfo
from typing import Any

from resrobot_departures.domain.models import Departure, RefreshSettings, Route

logger = logging.getLogger(__name__)


class DepartureNormalizer:
    """Turns raw trip records into sorted, cutoff-filtered departures.

    Pure transformation: no I/O and no state besides the settings it was
    created with.
    """

    def __init__(self, settings: RefreshSettings) -> None:
        """Initialize the normalizer.

        Args:
            settings: Cutoff offset, truncation length and local timezone.
        """
        self.settings = settings

    def normalize(
        self,
        raw_trips: Iterable[dict[str, Any]],
        routes: list[Route],
        now: datetime,
    ) -> list[Departure]:
        """Normalize one response's trips.

        Only the first leg of each trip is used. Trips departing before
        ``now + skip_minutes`` are dropped, malformed trips are skipped.

        Returns:
            Accepted departures sorted by timestamp.
        """
        cutoff = now + self.settings.skip
        accepted: list[Departure] = []

        for trip in raw_trips:
            try:
                departure = self._parse_trip(trip, routes)
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning(f"Skipping malformed trip record: {e!r}")
                continue
            if departure is None:
                continue
            if departure.timestamp >= cutoff:
                accepted.append(departure)

        return self.merge([accepted])

    @staticmethod
    def merge(departure_lists: Iterable[list[Departure]]) -> list[Departure]:
        """Concatenate departure lists and stable-sort them by timestamp."""
        merged = [departure for departures in departure_lists for departure in departures]
        merged.sort(key=lambda d: d.timestamp)
        return merged

    def _parse_trip(self, trip: dict[str, Any], routes: list[Route]) -> Departure | None:
        """Parse the first leg of a trip. Returns None when the trip has no legs."""
        leg = self._first_leg(trip)
        if leg is None:
            return None

        origin = leg["Origin"]
        destination = leg["Destination"]
        tz = self.settings.timezone
        departure_time = self._parse_stop_time(origin, tz)
        arrive_time = self._parse_stop_time(destination, tz)

        destination_text = self._destination_text(destination, routes)
        destination_text = self.truncate_destination(destination_text, self.settings.truncate_after)

        return Departure(
            timestamp=departure_time,
            departure_time_text=departure_time.astimezone(tz).strftime("%H:%M"),
            duration_text=self.format_duration(departure_time, arrive_time),
            line=self._line(leg),
            type_code=self._type_code(leg),
            destination_text=destination_text,
        )

    @staticmethod
    def _first_leg(trip: dict[str, Any]) -> dict[str, Any] | None:
        """Return the first leg; a single leg may come as an object instead of a list."""
        legs = trip["LegList"]["Leg"]
        if isinstance(legs, dict):
            return legs
        if not legs:
            return None
        return legs[0]

    @staticmethod
    def _parse_stop_time(stop: dict[str, Any], tz: tzinfo) -> datetime:
        """Combine a stop's local date and time fields into a UTC instant."""
        naive = datetime.fromisoformat(f"{stop['date']}T{stop['time']}")
        return naive.replace(tzinfo=tz).astimezone(UTC)

    @staticmethod
    def _destination_text(destination: dict[str, Any], routes: list[Route]) -> str:
        """Destination stop name, or the label of the first route ending there."""
        name = str(destination.get("name", ""))
        for route in routes:
            if route.label and route.matches_destination(
                destination.get("id"), destination.get("extId")
            ):
                return route.label
        return name

    @staticmethod
    def _product(leg: dict[str, Any]) -> dict[str, Any]:
        product = leg.get("Product") or {}
        if isinstance(product, list):
            product = product[0] if product else {}
        return product

    @classmethod
    def _type_code(cls, leg: dict[str, Any]) -> str:
        code = leg.get("transportCategory") or cls._product(leg).get("catOutS") or ""
        return str(code)

    @classmethod
    def _line(cls, leg: dict[str, Any]) -> str:
        line = leg.get("transportNumber") or cls._product(leg).get("num") or leg.get("name") or ""
        return str(line)

    @staticmethod
    def truncate_destination(text: str, truncate_after: int) -> str:
        """Cut the text at the first space at or after ``truncate_after`` characters.

        Disabled when ``truncate_after`` is 0 or less. Text without such a
        space is returned unchanged.
        """
        if truncate_after <= 0:
            return text
        index = text.find(" ", truncate_after)
        if index > 0:
            return text[:index]
        return text

    @staticmethod
    def format_duration(start: datetime, end: datetime) -> str:
        """Format travel time as ``HH:MM`` of whole hours and whole minutes.

        Hours and minutes are each counted over the full interval, so a
        65 minute trip reads "01:65". Existing boards depend on this format.
        """
        # Real elapsed time, also across daylight saving changes.
        seconds = end.timestamp() - start.timestamp()
        hours = int(seconds / 3600)
        minutes = int(seconds / 60)
        return f"{hours:02d}:{minutes:02d}"
