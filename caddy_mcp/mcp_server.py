"""
MCP protocol bridge
Builds the low-level MCP server whose tools/list and tools/call requests are
answered by the registry and the dispatcher
"""

from typing import List

import anyio
from mcp import types
from mcp.server import Server
from mcp.shared.exceptions import McpError

from .catalog import SERVER_INSTRUCTIONS
from .config import MCP_SERVER_NAME, MCP_SERVER_VERSION
from .dispatcher import Dispatcher
from .models import ErrorResult, ToolCallRequest


def create_mcp_server(dispatcher: Dispatcher, serialize: bool = False) -> Server:
    """Create the MCP server for a transport binding.

    With serialize=True each tool call runs to completion before the next
    one starts (stdio). ErrorResult envelopes become JSON-RPC errors rather
    than isError tool results.
    """
    server = Server(MCP_SERVER_NAME, version=MCP_SERVER_VERSION, instructions=SERVER_INSTRUCTIONS)
    lock = anyio.Lock() if serialize else None

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        """List all available MCP tools"""
        return [descriptor.to_mcp_tool() for descriptor in dispatcher.registry.descriptors()]

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        invocation = ToolCallRequest(name=req.params.name, arguments=req.params.arguments or {})
        if lock is not None:
            async with lock:
                result = await dispatcher.dispatch(invocation)
        else:
            result = await dispatcher.dispatch(invocation)

        if isinstance(result, ErrorResult):
            raise McpError(types.ErrorData(code=result.code, message=result.message, data={"reason": result.reason}))
        return types.ServerResult(types.CallToolResult(content=result.to_text_content(), isError=False))

    # Registered directly so raised McpErrors reach the client as protocol errors
    server.request_handlers[types.CallToolRequest] = call_tool
    return server
