"""
Entry point for the Google Docs markup export MCP server.
"""

import argparse
import logging
import os

from auth.config import get_export_config
from core.server import server

# Importing the tool modules registers their tools on the server
import gdocs  # noqa: F401

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Google Docs markup export MCP server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "streamable-http"],
        default=os.getenv("DOCS_EXPORT_TRANSPORT", "stdio"),
        help="Transport mode (default: stdio)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = get_export_config()
    logger.info(f"Export configuration: {config.get_environment_summary()}")
    if not config.is_configured():
        logger.warning("No service account configured; append_markdown_to_doc calls will fail until one is set")

    server.run(transport=args.transport)


if __name__ == "__main__":
    main()
