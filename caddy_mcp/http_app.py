"""
FastAPI host application for the network transports

Serves the health check and a plain HTTP tool API next to the MCP
endpoints that the sse and httpstream bindings mount on it.
"""

import logging
import uuid
from typing import Any, Callable, List, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from mcp.types import TextContent
from starlette.middleware.base import BaseHTTPMiddleware

from .config import MCP_SERVER_NAME, MCP_SERVER_VERSION
from .dispatcher import Dispatcher
from .models import ErrorResult, ToolCallRequest, ToolCallResponse, ToolListResponse

logger = logging.getLogger(__name__)


class DistributedTracingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        # Extract trace ID from incoming request or generate new one
        trace_id = request.headers.get("X-Trace-ID") or str(uuid.uuid4())
        request.state.trace_id = trace_id

        logger.info(f"[TRACE:{trace_id}] MCP Server request: {request.method} {request.url.path}")
        response = await call_next(request)
        response.headers["X-Trace-ID"] = trace_id
        logger.info(f"[TRACE:{trace_id}] MCP Server response: {response.status_code}")

        return response


def create_http_app(
    dispatcher: Dispatcher,
    cors_origins: Optional[List[str]] = None,
    lifespan: Optional[Callable[[FastAPI], Any]] = None,
    trace_requests: bool = True,
) -> FastAPI:
    """Build the FastAPI app shared by the sse and httpstream bindings.

    The SSE binding passes trace_requests=False: its endpoint writes to the
    raw ASGI send channel, which BaseHTTPMiddleware must not wrap.
    """
    app = FastAPI(
        title="Caddy MCP Server",
        description="MCP tools for managing a Caddy server through its admin API",
        version=MCP_SERVER_VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins or [],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Trace-ID", "Mcp-Session-Id", "Mcp-Protocol-Version"],
        expose_headers=["Mcp-Session-Id", "X-Trace-ID"],
    )
    if trace_requests:
        app.add_middleware(DistributedTracingMiddleware)

    @app.get("/health")
    async def http_health_check():
        """Health check"""
        return {"status": "healthy", "service": MCP_SERVER_NAME, "version": MCP_SERVER_VERSION}

    @app.get("/tools", response_model=ToolListResponse)
    async def http_list_tools():
        """HTTP endpoint to list available tools"""
        tools = [descriptor.to_mcp_tool() for descriptor in dispatcher.registry.descriptors()]
        return ToolListResponse(tools=tools)

    @app.post("/tools/call", response_model=ToolCallResponse)
    async def http_call_tool(request: ToolCallRequest, http_request: Request):
        """HTTP endpoint to call a tool without an MCP session"""
        trace_id = getattr(http_request.state, "trace_id", None)
        result = await dispatcher.dispatch(request, trace_id=trace_id)

        if isinstance(result, ErrorResult):
            return ToolCallResponse(
                result=[TextContent(type="text", text=f"Error: {result.message}")],
                success=False,
                error=result.message,
                code=result.code,
            )
        return ToolCallResponse(result=result.to_text_content(), success=True)

    return app
