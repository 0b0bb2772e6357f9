"""Query parameter construction for ResRobot trip searches."""

from collections.abc import Iterable

from resrobot_departures.adapters.resrobot_api.constants import (
    PASSLIST_DISABLED,
    PRODUCTS_MIN_EXCLUSIVE,
    RESPONSE_FORMAT,
)
from resrobot_departures.domain.models import ALL_TRANSPORT_TYPES_MASK, Route, products_mask


def products_parameter(mask: int) -> int | None:
    """Return the ``products`` value to send, or None to leave the filter out.

    Masks of 1 or less select nothing meaningful and a mask covering every
    transport type (or more) is the API default, so neither is sent.
    """
    if PRODUCTS_MIN_EXCLUSIVE < mask < ALL_TRANSPORT_TYPES_MASK:
        return mask
    return None


def build_trip_params(
    api_key: str,
    route: Route,
    transport_types: Iterable[str],
) -> dict[str, str]:
    """Build the query parameters of a trip search for one route."""
    params = {
        "format": RESPONSE_FORMAT,
        "passlist": PASSLIST_DISABLED,
        "key": api_key,
        "originId": route.from_id,
        "destId": route.to_id,
    }
    products = products_parameter(products_mask(transport_types))
    if products is not None:
        params["products"] = str(products)
    return params

