"""Domain models for ResRobot departures."""

from resrobot_departures.domain.models.board_row import BoardRow
from resrobot_departures.domain.models.departure import Departure
from resrobot_departures.domain.models.display_state import (
    STATUS_LOADING,
    STATUS_NEEDS_CONFIGURATION,
    STATUS_READY,
    DisplayState,
)
from resrobot_departures.domain.models.error_details import ErrorDetails
from resrobot_departures.domain.models.refresh_settings import RefreshSettings
from resrobot_departures.domain.models.route import Route
from resrobot_departures.domain.models.transport_type import (
    ALL_TRANSPORT_TYPES_MASK,
    DEFAULT_ICON_TABLE,
    TransportType,
    VehicleCategory,
    VehicleIcon,
    icon_for_type_code,
    products_mask,
)
from resrobot_departures.domain.models.trip_fetch_error import TripFetchError

__all__ = [
    "ALL_TRANSPORT_TYPES_MASK",
    "DEFAULT_ICON_TABLE",
    "STATUS_LOADING",
    "STATUS_NEEDS_CONFIGURATION",
    "STATUS_READY",
    "BoardRow",
    "Departure",
    "DisplayState",
    "ErrorDetails",
    "RefreshSettings",
    "Route",
    "TransportType",
    "TripFetchError",
    "VehicleCategory",
    "VehicleIcon",
    "icon_for_type_code",
    "products_mask",
]
