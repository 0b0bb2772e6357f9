"""Departure domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Departure:
    """A single upcoming departure on a monitored route."""

    timestamp: datetime  # Timezone-aware, used for sorting and cutoff filtering only
    departure_time_text: str  # Local "HH:MM"
    duration_text: str
    line: str
    type_code: str  # ResRobot transport category, e.g. "BLT" or "JRE"
    destination_text: str
