"""Board row domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BoardRow:
    """One rendered row of the departure board."""

    departure_time_text: str
    icon: str | None
    line: str
    duration_text: str
    destination_text: str
    opacity: float = 1.0

    @property
    def icon_name(self) -> str:
        """Short icon name for text output, e.g. ``"bus"`` for ``"fa fa-bus"``."""
        if not self.icon:
            return ""
        return self.icon.rsplit("-", 1)[-1]
