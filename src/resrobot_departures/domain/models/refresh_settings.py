"""Settings consumed by the refresh scheduler and departure normalizer."""

from dataclasses import dataclass
from datetime import timedelta
from zoneinfo import ZoneInfo


@dataclass(frozen=True)
class RefreshSettings:
    """Immutable refresh settings, derived once from application configuration."""

    update_interval: timedelta = timedelta(minutes=5)
    skip_minutes: int = 0
    maximum_entries: int = 6
    truncate_after: int = 0
    timezone: ZoneInfo = ZoneInfo("Europe/Stockholm")

    @property
    def skip(self) -> timedelta:
        """Offset from now before which departures are unusable."""
        return timedelta(minutes=self.skip_minutes)
