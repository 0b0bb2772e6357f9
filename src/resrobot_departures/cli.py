"""Command line interface for the ResRobot departure board."""

import argparse
import asyncio
import sys
from typing import Any

from resrobot_departures.adapters.config import AppConfig
from resrobot_departures.main import configure_logging, run, run_once


def _setup_argparse() -> argparse.ArgumentParser:
    """Set up and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="resrobot-departures",
        description="Upcoming departures between ResRobot stations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Poll forever and print the board after every update
  resrobot-departures run --config config.toml

  # Fetch once and print the board as JSON
  resrobot-departures once --json

Settings can also be given as RESROBOT_* environment variables,
e.g. RESROBOT_API_KEY=... or RESROBOT_SKIP_MINUTES=3.
        """,
    )
    parser.add_argument("--config", help="Path to TOML config file (default: config.toml)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("run", help="Poll and print the board until interrupted")

    once_parser = subparsers.add_parser("once", help="Run one refresh cycle and print the board")
    once_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def _load_config(args: Any) -> AppConfig:
    """Load config from environment, overriding the TOML path from the command line."""
    if args.config:
        return AppConfig(config_file=args.config)
    return AppConfig()


async def _execute_command(args: Any) -> None:
    """Execute the appropriate command based on args."""
    config = _load_config(args)
    if args.command == "run":
        await run(config)
    elif args.command == "once":
        await run_once(config, as_json=args.json)


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.debug)

    try:
        await _execute_command(args)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nShutting down.", file=sys.stderr)


if __name__ == "__main__":
    cli_main()
