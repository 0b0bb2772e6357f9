"""Main entry point for the ResRobot departures application."""

import asyncio
import logging
import sys

import aiohttp

from resrobot_departures.adapters.api_rate_limiter import ApiRateLimiter
from resrobot_departures.adapters.config import AppConfig, RouteConfigurationLoader
from resrobot_departures.adapters.display import (
    BoardFormatter,
    ConsoleBoardRenderer,
    DisplayStatePublisher,
)
from resrobot_departures.adapters.resrobot_api import ResRobotTripRepository
from resrobot_departures.application.refresh_scheduler import RefreshScheduler
from resrobot_departures.domain.models import Route

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    """Configure root logging to stderr so stdout stays free for the board."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def load_routes(config: AppConfig) -> list[Route]:
    """Load routes from the TOML file; a missing file means no routes."""
    try:
        routes = RouteConfigurationLoader.load(config)
    except FileNotFoundError as e:
        logger.warning(f"{e}")
        return []

    logger.info(f"Loaded {len(routes)} route(s):")
    for route in routes:
        label = f" ({route.label})" if route.label else ""
        logger.info(f"  - {route.from_id} -> {route.to_id}{label}")
    return routes


def build_scheduler(
    config: AppConfig,
    routes: list[Route],
    session: aiohttp.ClientSession,
    publisher: DisplayStatePublisher,
) -> RefreshScheduler:
    """Wire the repository, publisher and settings into a scheduler."""
    repository = ResRobotTripRepository(session=session, config=config)
    return RefreshScheduler(
        repository=repository,
        publisher=publisher,
        routes=routes,
        settings=config.refresh_settings(),
    )


def build_publisher(config: AppConfig) -> tuple[DisplayStatePublisher, ConsoleBoardRenderer]:
    """Create the display state publisher with a console renderer attached."""
    renderer = ConsoleBoardRenderer(BoardFormatter(config), language=config.language)
    publisher = DisplayStatePublisher()
    return publisher, renderer


async def run(config: AppConfig) -> None:
    """Poll forever and print the board after every publish."""
    routes = load_routes(config)
    if routes and not config.api_key:
        logger.warning("No API key configured (RESROBOT_API_KEY); requests will be rejected")

    publisher, renderer = build_publisher(config)
    publisher.subscribe(renderer)

    try:
        async with aiohttp.ClientSession() as session:
            scheduler = build_scheduler(config, routes, session, publisher)
            try:
                await scheduler.run_forever()
            finally:
                await scheduler.stop()
    finally:
        # Limiter locks belong to this run's event loop.
        ApiRateLimiter.reset_instances()


async def run_once(config: AppConfig, as_json: bool = False) -> int:
    """Run a single refresh cycle and print the resulting board.

    Returns:
        Number of departures published.
    """
    routes = load_routes(config)
    publisher, renderer = build_publisher(config)

    try:
        async with aiohttp.ClientSession() as session:
            scheduler = build_scheduler(config, routes, session, publisher)
            await scheduler.start()
            await scheduler.stop()
    finally:
        ApiRateLimiter.reset_instances()

    state = publisher.display_state
    print(renderer.render_json(state) if as_json else renderer.render(state))
    return len(state.departures)


async def main() -> None:
    """Main application entry point."""
    configure_logging()
    await run(AppConfig())


if __name__ == "__main__":
    asyncio.run(main())
