"""Application services: departure normalization and the refresh scheduler."""

from resrobot_departures.application.departure_normalizer import DepartureNormalizer
from resrobot_departures.application.refresh_scheduler import RefreshScheduler

__all__ = ["DepartureNormalizer", "RefreshScheduler"]
