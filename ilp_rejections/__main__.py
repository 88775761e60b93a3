"""Entry point for running the ilp-rejections MCP server."""

from __future__ import annotations

from ilp_rejections.config import Config
from ilp_rejections.log import configure_logging
from ilp_rejections.server import create_server


def main() -> None:
    config = Config.from_env()
    configure_logging(config)
    server = create_server(config)
    server.run()


if __name__ == '__main__':
    main()
