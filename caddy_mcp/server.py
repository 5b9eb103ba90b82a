#!/usr/bin/env python3
"""
MCP Server for Caddy
Exposes the Caddy admin API and config adapters as MCP tools for LLM integration

Supports stdio, SSE and streamable HTTP transports
"""

import asyncio
import logging
import sys
from typing import Optional, Sequence

from .adapters import AdapterGateway
from .admin import CaddyAdminClient
from .catalog import build_registry
from .config import MCP_SERVER_NAME, MCP_SERVER_VERSION, ServerConfig, load_config
from .dispatcher import Dispatcher
from .errors import ConfigurationError
from .transports import create_binding

logger = logging.getLogger(__name__)


async def serve(config: ServerConfig) -> None:
    """Wire the shared client, registry and dispatcher, then run the configured binding"""
    logger.info(f"Starting MCP Server: {MCP_SERVER_NAME} v{MCP_SERVER_VERSION}")
    logger.info(f"Transport: {config.transport.value}")
    logger.info(f"Connecting to Caddy admin API at: {config.base_url}")

    admin = CaddyAdminClient(config.base_url, timeout=config.request_timeout)
    gateway = AdapterGateway.default(admin)
    dispatcher = Dispatcher(build_registry(admin, gateway))
    binding = create_binding(dispatcher, config)

    await admin.check_connection()

    try:
        await binding.serve()
    finally:
        await admin.aclose()


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main function to start the MCP server"""
    try:
        config = load_config(argv)
    except ConfigurationError as e:
        logger.critical(f"💥 {e}")
        sys.exit(1)

    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("MCP Server stopped")


if __name__ == "__main__":
    main()
