"""Protocol for the departure refresh loop."""

from typing import Protocol


class RefreshSchedulerProtocol(Protocol):
    """Protocol for polling trips and republishing departures."""

    async def start(self) -> None:
        """Run the first refresh cycle and arm the update timer."""
        ...

    async def stop(self) -> None:
        """Cancel the pending update timer and any in-flight cycle."""
        ...
