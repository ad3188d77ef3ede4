"""Command line entry point for the stdio tool server."""

from __future__ import annotations

import argparse
import os
import sys

import anyio
import structlog

from tool_server.server import build_server
from tool_server.utils.config import get_settings
from tool_server.utils.logging import configure_logging

logger = structlog.get_logger()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the MCP tool server over stdio")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (overrides LOG_LEVEL and the config file)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        settings = get_settings(args.config)
        configure_logging(args.log_level or settings.log_level)
        server = build_server(settings)
    except Exception as e:
        print(f"Failed to start server: {e}", file=sys.stderr)
        return 1

    try:
        received_signal = anyio.run(server.run_stdio)
    except Exception as e:
        logger.error("Server failed", error=str(e))
        print(f"Server error: {e}", file=sys.stderr)
        return 1

    if received_signal is not None:
        logger.info("Server exited", signal=received_signal.name)
        sys.stdout.flush()
        sys.stderr.flush()
        # An abandoned stdin read still holds a non-daemon worker thread,
        # which would block interpreter shutdown.
        os._exit(0)

    logger.info("Server exited")
    return 0


if __name__ == "__main__":
    sys.exit(main())
