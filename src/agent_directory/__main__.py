"""CLI entry point for agent-directory.

This module provides the command-line interface for starting the server.
It can be invoked as `agent-directory` (via the script entry point) or
`python -m agent_directory`.
"""

import argparse
import logging
import sys

import uvicorn

from agent_directory import __version__, create_app
from agent_directory.config import AgentDirectorySettings


def main() -> None:
    """Main entry point for the agent-directory CLI.

    Parses command-line arguments and starts the uvicorn server with the
    FastAPI application.
    """
    parser = argparse.ArgumentParser(
        prog="agent-directory",
        description="Directory server for discovering and selecting A2A agents",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"agent-directory {__version__}",
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind the server to (default: 127.0.0.1, can be set via AGENT_DIRECTORY_HOST)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind the server to (default: 8000, can be set via AGENT_DIRECTORY_PORT)",
    )

    parser.add_argument(
        "--default-agent-urls",
        type=str,
        default=None,
        help="Comma-separated agent URLs registered at startup (can be set via AGENT_DIRECTORY_DEFAULT_AGENT_URLS)",
    )

    parser.add_argument(
        "--resolve-timeout",
        type=float,
        default=None,
        help="Seconds allowed for fetching one agent card (default: 10, can be set via AGENT_DIRECTORY_RESOLVE_TIMEOUT_SECONDS)",
    )

    parser.add_argument(
        "--header",
        action="append",
        default=None,
        metavar="NAME=VALUE",
        help="Header added to every agent request; may be repeated",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO, can be set via AGENT_DIRECTORY_LOG_LEVEL)",
    )

    args = parser.parse_args()

    # Build settings, CLI args override environment variables
    settings_kwargs = {}
    if args.host is not None:
        settings_kwargs["host"] = args.host
    if args.port is not None:
        settings_kwargs["port"] = args.port
    if args.default_agent_urls is not None:
        settings_kwargs["default_agent_urls"] = args.default_agent_urls
    if args.resolve_timeout is not None:
        settings_kwargs["resolve_timeout_seconds"] = args.resolve_timeout
    if args.header:
        headers = {}
        for item in args.header:
            name, sep, value = item.partition("=")
            if not sep or not name.strip():
                parser.error(f"Invalid header '{item}', expected NAME=VALUE")
            headers[name.strip()] = value.strip()
        settings_kwargs["custom_headers"] = headers
    if args.log_level is not None:
        settings_kwargs["log_level"] = args.log_level

    settings = AgentDirectorySettings(**settings_kwargs)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    sys.exit(main())
