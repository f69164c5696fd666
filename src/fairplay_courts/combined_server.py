"""Launcher for the HTTP API or the MCP server."""

import argparse
import logging

from .config import config

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        filename=config.log_file,
        level=getattr(logging, "DEBUG" if config.enable_debug_mode else level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run_server(mode: str = "http", host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run the server in the specified mode.

    Args:
        mode: Server mode ("http" or "mcp")
        host: Host for the HTTP server
        port: Port for the HTTP server
    """
    logger.info(f"Starting FairPlay courts server in {mode} mode")

    if mode == "http":
        from .api import courts_api

        courts_api.run(host, port)

    elif mode == "mcp":
        from .server import main as mcp_main

        mcp_main()

    else:
        logger.error(f"Unknown mode: {mode}")
        raise ValueError(f"Mode must be 'http' or 'mcp', got: {mode}")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="FairPlay courts server")
    parser.add_argument(
        "--mode",
        choices=["http", "mcp"],
        default="http",
        help="Server mode: http (REST API) or mcp (MCP over stdio)",
    )
    parser.add_argument(
        "--host", default=config.host, help=f"Host for HTTP server (default: {config.host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=config.port,
        help=f"Port for HTTP server (default: {config.port})",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Log level (default: INFO)",
    )

    args = parser.parse_args()
    configure_logging(args.log_level)

    try:
        run_server(mode=args.mode, host=args.host, port=args.port)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error(f"Server error: {e}")
        raise


if __name__ == "__main__":
    main()
