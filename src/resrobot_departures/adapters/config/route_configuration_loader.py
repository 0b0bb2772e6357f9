"""Route configuration loader."""

import logging
from typing import Any

from resrobot_departures.adapters.config.app_config import AppConfig
from resrobot_departures.domain.models.route import Route

logger = logging.getLogger(__name__)


class RouteConfigurationLoader:
    """Loads routes from app config."""

    @staticmethod
    def load_route_from_data(route_data: dict[str, Any]) -> Route | None:
        """Load a single route from a ``[[routes]]`` table.

        Returns None for entries without both station ids, or with
        placeholder ids containing "XXX".
        """
        if not isinstance(route_data, dict):
            return None

        from_id = route_data.get("from")
        to_id = route_data.get("to")
        if not from_id or not to_id:
            logger.warning(f"Ignoring route without 'from' and 'to': {route_data}")
            return None

        from_id = str(from_id)
        to_id = str(to_id)
        if "XXX" in from_id or "XXX" in to_id:
            return None

        label = route_data.get("label") or ""
        if not isinstance(label, str):
            label = str(label)

        return Route(from_id=from_id, to_id=to_id, label=label)

    @staticmethod
    def load(config: AppConfig) -> list[Route]:
        """Load all routes from the TOML file named in the app config."""
        routes: list[Route] = []
        for route_data in config.get_routes_config():
            route = RouteConfigurationLoader.load_route_from_data(route_data)
            if route is not None:
                routes.append(route)
        return routes
