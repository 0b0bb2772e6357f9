"""Formatter turning the departure list into board rows."""

from datetime import UTC, datetime, timedelta

from resrobot_departures.adapters.config.app_config import AppConfig
from resrobot_departures.domain.models import BoardRow, Departure, icon_for_type_code


class BoardFormatter:
    """Lays out departures as board rows with icons and fade-out opacity."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with row limit, fade and icon settings.
        """
        self.config = config

    def format_rows(self, departures: list[Departure], now: datetime | None = None) -> list[BoardRow]:
        """Build at most ``maximum_entries`` rows, skipping departures already past the cutoff."""
        now = now or datetime.now(UTC)
        cutoff = now + timedelta(minutes=self.config.skip_minutes)
        visible = [d for d in departures if d.timestamp >= cutoff][: self.config.maximum_entries]

        return [
            BoardRow(
                departure_time_text=departure.departure_time_text,
                icon=icon_for_type_code(departure.type_code, self.config.icon_table),
                line=departure.line,
                duration_text=departure.duration_text,
                destination_text=departure.destination_text,
                opacity=self.row_opacity(index, len(visible)),
            )
            for index, departure in enumerate(visible)
        ]

    def row_opacity(self, index: int, row_count: int) -> float:
        """Opacity of a row: 1.0 above the fade point, then linearly down towards 0."""
        if not self.config.fade or self.config.fade_point >= 1:
            return 1.0

        starting_point = self.config.maximum_entries * self.config.fade_point
        steps = min(row_count, self.config.maximum_entries) - starting_point
        if index < starting_point or steps <= 0:
            return 1.0
        current_step = index - starting_point
        return max(0.0, 1 - current_step / steps)
