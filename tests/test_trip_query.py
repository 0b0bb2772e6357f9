"""Tests for ResRobot trip query construction."""

import pytest

from resrobot_departures.adapters.resrobot_api.trip_query import (
    build_trip_params,
    products_parameter,
)
from resrobot_departures.domain.models import ALL_TRANSPORT_TYPES_MASK, Route, TransportType

ROUTE = Route(from_id="740020749", to_id="740000002")


class TestProductsParameter:
    """Tests for products_parameter()."""

    @pytest.mark.parametrize("mask", [0, 1])
    def test_when_mask_selects_nothing_then_omitted(self, mask: int) -> None:
        """Given a mask of 1 or less, when computing, then no filter is sent."""
        assert products_parameter(mask) is None

    def test_when_every_type_selected_then_omitted(self) -> None:
        """Given all eight transport types, when computing, then no filter is sent."""
        assert products_parameter(ALL_TRANSPORT_TYPES_MASK) is None

    def test_when_subset_selected_then_sent(self) -> None:
        """Given subway and bus, when computing, then mask 160 is sent."""
        assert products_parameter(TransportType.SUBWAY | TransportType.BUS) == 160


class TestBuildTripParams:
    """Tests for build_trip_params()."""

    def test_fixed_parameters_always_present(self) -> None:
        """Given any route, when building params, then format, passlist, key and ids are set."""
        params = build_trip_params("secret", ROUTE, TransportType.config_names())

        assert params == {
            "format": "json",
            "passlist": "0",
            "key": "secret",
            "originId": "740020749",
            "destId": "740000002",
        }

    def test_when_subway_and_bus_then_products_160(self) -> None:
        """Given subway and bus configured, when building params, then products=160."""
        params = build_trip_params("secret", ROUTE, ["subway", "bus"])

        assert params["products"] == "160"

    def test_when_duplicates_and_unknown_names_then_ignored(self) -> None:
        """Given duplicate and unknown names, when building params, then each bit counts once."""
        params = build_trip_params("secret", ROUTE, ["ferry", "ferry", "hovercraft"])

        assert params["products"] == "256"

    def test_when_no_types_then_products_omitted(self) -> None:
        """Given no transport types, when building params, then no products filter is sent."""
        assert "products" not in build_trip_params("secret", ROUTE, [])
