"""
Streamable HTTP binding: MCP requests POSTed to /mcp, answered over
chunked event streams that carry heartbeat pings while a tool is running
"""

import contextlib
import logging

from fastapi import FastAPI
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.types import Receive, Scope, Send

from ..http_app import create_http_app
from ..mcp_server import create_mcp_server
from .base import NetworkBinding

logger = logging.getLogger(__name__)

MCP_PATH = "/mcp"


class StreamableHTTPEndpoint:
    """Raw ASGI endpoint handing requests to the session manager"""

    def __init__(self, session_manager: StreamableHTTPSessionManager):
        self.session_manager = session_manager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.session_manager.handle_request(scope, receive, send)


class StreamableHTTPBinding(NetworkBinding):
    name = "Streamable HTTP"

    def build_app(self) -> FastAPI:
        mcp_server = create_mcp_server(self.dispatcher)
        session_manager = StreamableHTTPSessionManager(app=mcp_server, json_response=False)

        @contextlib.asynccontextmanager
        async def lifespan(app: FastAPI):
            async with session_manager.run():
                logger.info(f"Streamable HTTP session manager started (heartbeat every {self.config.keepalive_interval:g}s)")
                yield

        app = create_http_app(self.dispatcher, cors_origins=self.config.cors_origins, lifespan=lifespan)
        app.add_route(MCP_PATH, StreamableHTTPEndpoint(session_manager), methods=["GET", "POST", "DELETE"])
        return app
