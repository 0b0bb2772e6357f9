"""Ports (interfaces) for the ports-and-adapters architecture."""

from resrobot_departures.domain.ports.trip_repository import TripRepository

__all__ = ["TripRepository"]
