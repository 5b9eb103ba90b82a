from __future__ import annotations

import asyncio

import anyio
import httpx
import pytest
from mcp import types
from mcp.shared.exceptions import McpError

from caddy_mcp.dispatcher import Dispatcher
from caddy_mcp.mcp_server import create_mcp_server
from caddy_mcp.models import ToolDescriptor
from caddy_mcp.registry import ToolOutput, ToolRegistry


def _call_tool(server, name: str, arguments: dict):
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    return asyncio.run(server.request_handlers[types.CallToolRequest](request))


def test_list_tools(make_dispatcher) -> None:
    server = create_mcp_server(make_dispatcher(lambda request: httpx.Response(200)))

    result = asyncio.run(server.request_handlers[types.ListToolsRequest](types.ListToolsRequest(method="tools/list")))

    assert {tool.name for tool in result.root.tools} == {
        "get_caddy_config",
        "update_caddy_config",
        "convert_caddyfile_to_json",
        "convert_nginx_to_json",
        "convert_yaml_to_json",
        "upstream_proxy_statuses",
    }


def test_call_tool_returns_text_content(make_dispatcher) -> None:
    server = create_mcp_server(make_dispatcher(lambda request: httpx.Response(200, content=b'{"apps":{}}')))

    result = _call_tool(server, "get_caddy_config", {})

    assert result.root.isError is False
    assert [c.text for c in result.root.content] == ['{"apps":{}}']


def test_protocol_errors_are_raised_as_mcp_errors(make_dispatcher) -> None:
    server = create_mcp_server(make_dispatcher(lambda request: httpx.Response(200)), serialize=True)

    with pytest.raises(McpError) as excinfo:
        _call_tool(server, "convert_yaml_to_json", {})

    assert excinfo.value.error.code == types.INVALID_PARAMS
    assert excinfo.value.error.data == {"reason": "missing_argument"}


def test_handler_errors_are_raised_as_mcp_errors(make_dispatcher) -> None:
    server = create_mcp_server(make_dispatcher(lambda request: httpx.Response(200, content=b"")))

    with pytest.raises(McpError) as excinfo:
        _call_tool(server, "get_caddy_config", {})

    assert excinfo.value.error.code == types.INTERNAL_ERROR
    assert excinfo.value.error.message == "no configuration currently loaded"


def test_tools_capability_is_advertised(make_dispatcher) -> None:
    server = create_mcp_server(make_dispatcher(lambda request: httpx.Response(200)))

    options = server.create_initialization_options()

    assert options.server_name == "caddy-mcp"
    assert options.capabilities.tools is not None


def _slow_tool_server(events: list, serialize: bool):
    async def slow(arguments):
        events.append("start")
        await anyio.sleep(0.05)
        events.append("end")
        return ToolOutput(text="done")

    registry = ToolRegistry()
    registry.register(ToolDescriptor(name="slow", description="takes a while"), slow)
    registry.seal()
    return create_mcp_server(Dispatcher(registry), serialize=serialize)


def _call_twice_concurrently(server) -> None:
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name="slow", arguments={}),
    )

    async def run() -> None:
        async with anyio.create_task_group() as tg:
            tg.start_soon(handler, request)
            tg.start_soon(handler, request)

    asyncio.run(run())


def test_serialized_calls_run_one_at_a_time() -> None:
    events: list = []

    _call_twice_concurrently(_slow_tool_server(events, serialize=True))

    assert events == ["start", "end", "start", "end"]


def test_unserialized_calls_overlap() -> None:
    events: list = []

    _call_twice_concurrently(_slow_tool_server(events, serialize=False))

    assert events == ["start", "start", "end", "end"]
