"""Contracts (protocols) between the refresh engine and its collaborators."""

from resrobot_departures.domain.contracts.departure_publisher import DeparturePublisherProtocol
from resrobot_departures.domain.contracts.refresh_scheduler import RefreshSchedulerProtocol

__all__ = ["DeparturePublisherProtocol", "RefreshSchedulerProtocol"]
