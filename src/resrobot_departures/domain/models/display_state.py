"""Display state dataclass."""

from dataclasses import dataclass, field
from datetime import datetime

from resrobot_departures.domain.models.departure import Departure

STATUS_LOADING = "loading"
STATUS_READY = "ready"
STATUS_NEEDS_CONFIGURATION = "needs_configuration"


@dataclass
class DisplayState:
    """What the display layer currently shows."""

    departures: list[Departure] = field(default_factory=list)
    last_update: datetime | None = None
    status: str = STATUS_LOADING
