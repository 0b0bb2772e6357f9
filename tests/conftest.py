"""Shared fixtures with sample ResRobot trip responses."""

from datetime import UTC, datetime, timedelta
from typing import Any
from zoneinfo import ZoneInfo

import pytest

from resrobot_departures.domain.models import Departure, RefreshSettings, Route

STOCKHOLM = ZoneInfo("Europe/Stockholm")

# 2026-10-19 12:00 local time in Stockholm (CEST, UTC+2)
FIXED_NOW = datetime(2026, 10, 19, 10, 0, tzinfo=UTC)


def make_trip(
    depart: datetime,
    arrive: datetime,
    *,
    dest_id: str = "740000002",
    dest_name: str = "Göteborg Centralstation",
    category: str = "JRE",
    number: str = "42",
) -> dict[str, Any]:
    """Build a raw trip record with a single leg, as returned by ResRobot."""
    depart_local = depart.astimezone(STOCKHOLM)
    arrive_local = arrive.astimezone(STOCKHOLM)
    return {
        "LegList": {
            "Leg": [
                {
                    "Origin": {
                        "id": "740000001",
                        "name": "Stockholm Centralstation",
                        "date": depart_local.strftime("%Y-%m-%d"),
                        "time": depart_local.strftime("%H:%M:%S"),
                    },
                    "Destination": {
                        "id": dest_id,
                        "name": dest_name,
                        "date": arrive_local.strftime("%Y-%m-%d"),
                        "time": arrive_local.strftime("%H:%M:%S"),
                    },
                    "transportCategory": category,
                    "transportNumber": number,
                }
            ]
        }
    }


def make_departure(timestamp: datetime, line: str = "42") -> Departure:
    """Build a normalized departure at the given instant."""
    return Departure(
        timestamp=timestamp,
        departure_time_text=timestamp.astimezone(STOCKHOLM).strftime("%H:%M"),
        duration_text="00:30",
        line=line,
        type_code="BLT",
        destination_text="Slussen",
    )


@pytest.fixture
def now() -> datetime:
    """A fixed current instant."""
    return FIXED_NOW


@pytest.fixture
def settings() -> RefreshSettings:
    """Refresh settings with a five minute base interval and no skip."""
    return RefreshSettings(
        update_interval=timedelta(minutes=5),
        skip_minutes=0,
        maximum_entries=6,
        truncate_after=0,
        timezone=STOCKHOLM,
    )


@pytest.fixture
def route() -> Route:
    """A route from Stockholm C to Göteborg C without label."""
    return Route(from_id="740000001", to_id="740000002")


@pytest.fixture
def sample_trip_response(now: datetime) -> dict[str, Any]:
    """Full trip response with three trips in non-chronological order."""
    return {
        "Trip": [
            make_trip(now + timedelta(minutes=20), now + timedelta(minutes=50), number="3"),
            make_trip(now + timedelta(minutes=5), now + timedelta(minutes=35), number="1"),
            make_trip(now + timedelta(minutes=10), now + timedelta(minutes=40), number="2"),
        ]
    }


@pytest.fixture
def sample_config_toml(tmp_path) -> str:
    """Create a temporary TOML config file."""
    toml_content = """
transport_types = ["subway", "bus"]

[api]
key = "secret-key"
timeout = 5

[schedule]
update_interval_seconds = 120
skip_minutes = 3
maximum_entries = 8

[display]
truncate_after = 5
fade = false
fade_point = 0.5
timezone = "Europe/Stockholm"

[display.icon_table]
T = "fa fa-tram"

[[routes]]
from = "740020749"
to = "740000002"
label = "Göteborg"

[[routes]]
from = 740020749
to = 740001617
"""
    config_file = tmp_path / "config.toml"
    config_file.write_text(toml_content, encoding="utf-8")
    return str(config_file)
