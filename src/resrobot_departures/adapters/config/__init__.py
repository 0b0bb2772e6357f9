"""Configuration adapters."""

from resrobot_departures.adapters.config.app_config import AppConfig
from resrobot_departures.adapters.config.route_configuration_loader import (
    RouteConfigurationLoader,
)

__all__ = ["AppConfig", "RouteConfigurationLoader"]
