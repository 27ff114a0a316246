"""Command-line entry point: ``python -m droplet_mcp_server``."""

import logging
import sys

from .config import Config
from .mcp_server import McpServer

logger = logging.getLogger("droplet_mcp_server")


def main() -> None:
    try:
        config = Config.from_env()
    except ValueError as e:
        print(f"Droplet MCP Server: invalid configuration - {e}", file=sys.stderr)
        sys.exit(2)

    # stdout carries the protocol in stdio mode, so logs go to stderr
    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    valid, error = config.is_valid_for_mode()
    if not valid:
        logger.error("Invalid configuration: %s", error)
        sys.exit(2)

    if not config.api_token:
        logger.warning(
            "DIGITALOCEAN_API_TOKEN is not set; tool calls need an Authorization: Bearer header"
        )

    server = McpServer(config)
    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Stopped")


if __name__ == "__main__":
    main()
