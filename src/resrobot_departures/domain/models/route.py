"""Route domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Route:
    """An origin/destination station pair to poll.

    The optional label replaces the destination stop name on the board
    for trips ending at ``to_id``.
    """

    from_id: str
    to_id: str
    label: str = ""

    def matches_destination(self, *stop_ids: str | None) -> bool:
        """Return True if any of the given stop ids is this route's destination."""
        return any(stop_id is not None and str(stop_id) == self.to_id for stop_id in stop_ids)
