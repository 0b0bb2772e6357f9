"""Console rendering of the departure board."""

import json
import sys
from dataclasses import asdict
from typing import TextIO

from resrobot_departures.adapters.display.board_formatter import BoardFormatter
from resrobot_departures.domain.models import (
    STATUS_NEEDS_CONFIGURATION,
    STATUS_READY,
    BoardRow,
    DisplayState,
)

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "needs_configuration": "Please set at least one route to watch.",
        "loading": "Fetching departures ...",
        "no_departures": "No departures",
    },
    "sv": {
        "needs_configuration": "Ange minst en sträcka att bevaka.",
        "loading": "Hämtar avgångar ...",
        "no_departures": "Inga avgångar",
    },
    "de": {
        "needs_configuration": "Bitte mindestens eine Strecke konfigurieren.",
        "loading": "Abfahrten werden geladen ...",
        "no_departures": "Keine Abfahrten",
    },
}


class ConsoleBoardRenderer:
    """Prints the board to a text stream whenever the display state changes."""

    def __init__(
        self,
        formatter: BoardFormatter,
        language: str = "en",
        stream: TextIO | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            formatter: Builds rows from departures.
            language: Message language; unknown languages fall back to English.
            stream: Output stream, stdout when omitted.
        """
        self.formatter = formatter
        self.messages = MESSAGES.get(language, MESSAGES["en"])
        self.stream = stream or sys.stdout

    async def __call__(self, state: DisplayState) -> None:
        """Listener entry point for DisplayStatePublisher."""
        self.stream.write(self.render(state) + "\n")
        self.stream.flush()

    def render(self, state: DisplayState) -> str:
        """Render the state as text lines."""
        if state.status == STATUS_NEEDS_CONFIGURATION:
            return self.messages["needs_configuration"]
        if state.status != STATUS_READY:
            return self.messages["loading"]

        # Fully faded rows are invisible on the real board as well.
        rows = [row for row in self.formatter.format_rows(state.departures) if row.opacity > 0]
        if not rows:
            return self.messages["no_departures"]
        return "\n".join(self._format_row(row) for row in rows)

    def render_json(self, state: DisplayState) -> str:
        """Render the state as a JSON document."""
        rows = self.formatter.format_rows(state.departures)
        payload = {
            "status": state.status,
            "last_update": state.last_update.isoformat() if state.last_update else None,
            "departures": [asdict(row) for row in rows],
        }
        return json.dumps(payload, indent=2, ensure_ascii=False)

    @staticmethod
    def _format_row(row: BoardRow) -> str:
        return (
            f"{row.departure_time_text:<6}{row.icon_name:<7}{row.line:<6}"
            f"{row.duration_text:<7}{row.destination_text}"
        )
