"""
stdio binding: MCP framed over standard input/output
"""

import logging

from mcp.server.stdio import stdio_server

from ..mcp_server import create_mcp_server
from .base import TransportBinding

logger = logging.getLogger(__name__)


class StdioBinding(TransportBinding):
    name = "stdio"

    async def serve(self) -> None:
        server = create_mcp_server(self.dispatcher, serialize=True)
        logger.info("🚀 Starting MCP Server in stdio mode")
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
