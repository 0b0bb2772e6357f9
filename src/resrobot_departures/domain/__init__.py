"""Domain layer - core models, ports and contracts."""

from resrobot_departures.domain.models import (
    Departure,
    RefreshSettings,
    Route,
    TransportType,
)
from resrobot_departures.domain.ports import TripRepository

__all__ = [
    "Departure",
    "RefreshSettings",
    "Route",
    "TransportType",
    "TripRepository",
]
