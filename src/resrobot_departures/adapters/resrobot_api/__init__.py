"""ResRobot journey planner adapter."""

from resrobot_departures.adapters.resrobot_api.trip_repository import ResRobotTripRepository

__all__ = ["ResRobotTripRepository"]
