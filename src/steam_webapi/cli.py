#!/usr/bin/env python3
"""Command line access to the Steam Web API.

    steam-webapi playerSummaries 76561198000000001,76561198000000002
    steam-webapi newsForApp 440 3 300
    steam-webapi --list

Prints the raw response body to stdout. Reads STEAM_API_KEY and
STEAM_WEBSITE from the environment or a .env file.
"""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from steam_webapi.client import SteamAPIError, SteamClient
from steam_webapi.endpoints import ConfigurationError, EndpointRegistry


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Log to stderr so stdout carries only the response body."""
    logging.basicConfig(
        level=os.getenv("STEAM_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="steam-webapi",
        description="Call a Steam Web API endpoint and print the raw response.",
    )
    parser.add_argument("endpoint", nargs="?", help="Symbolic endpoint name")
    parser.add_argument("args", nargs="*", help="Endpoint arguments, in order")
    parser.add_argument(
        "--list", action="store_true", help="List endpoints and their arguments"
    )
    return parser


def list_endpoints() -> str:
    lines = []
    for name in sorted(EndpointRegistry.names()):
        endpoint_class = EndpointRegistry.get(name)
        lines.append(f"{name} {' '.join(endpoint_class.argument_names())}")
    return "\n".join(lines)


def run(argv: list[str] | None = None) -> int:
    """Run the CLI and return the exit status."""
    parser = build_parser()
    options = parser.parse_args(argv)

    if options.list:
        print(list_endpoints())
        return 0

    if not options.endpoint:
        parser.print_usage(sys.stderr)
        return 2

    try:
        client = SteamClient()
    except ValueError as e:
        logger.error(str(e))
        return 2

    with client:
        try:
            body = client.fetch(options.endpoint, *options.args)
        except ConfigurationError as e:
            logger.error(str(e))
            return 2
        except SteamAPIError as e:
            logger.error(f"Steam request failed: {e}")
            return 1

    print(body)
    return 0


def main() -> None:
    """Main entry point."""
    load_dotenv()
    configure_logging()
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        logger.info("Interrupted")
        sys.exit(130)


if __name__ == "__main__":
    main()
