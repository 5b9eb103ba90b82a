"""
Event-stream binding: MCP over Server-Sent Events

Clients open GET /sse and post their requests to /messages/?session_id=...
"""

from fastapi import FastAPI, Request
from mcp.server.sse import SseServerTransport
from starlette.responses import Response

from ..http_app import create_http_app
from ..mcp_server import create_mcp_server
from .base import NetworkBinding

SSE_PATH = "/sse"
MESSAGES_PATH = "/messages/"


class SSEBinding(NetworkBinding):
    name = "SSE"

    def build_app(self) -> FastAPI:
        mcp_server = create_mcp_server(self.dispatcher)
        sse = SseServerTransport(MESSAGES_PATH)

        async def handle_sse(request: Request) -> Response:
            async with sse.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
                await mcp_server.run(read_stream, write_stream, mcp_server.create_initialization_options())
            return Response()

        app = create_http_app(self.dispatcher, cors_origins=self.config.cors_origins, trace_requests=False)
        app.add_route(SSE_PATH, handle_sse, methods=["GET"])
        app.mount(MESSAGES_PATH, app=sse.handle_post_message)
        return app
