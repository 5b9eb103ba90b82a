from __future__ import annotations

import httpx
import pytest

from caddy_mcp.adapters import AdapterGateway
from caddy_mcp.catalog import build_registry
from caddy_mcp.errors import DuplicateToolError, UnknownToolError
from caddy_mcp.models import ParameterSpec, ToolDescriptor
from caddy_mcp.registry import ToolOutput, ToolRegistry


async def _noop(arguments):
    return ToolOutput(text="")


def test_duplicate_names_are_rejected() -> None:
    registry = ToolRegistry()
    registry.register(ToolDescriptor(name="a", description="first"), _noop)

    with pytest.raises(DuplicateToolError):
        registry.register(ToolDescriptor(name="a", description="second"), _noop)


def test_sealed_registry_is_read_only() -> None:
    registry = ToolRegistry()
    registry.seal()

    with pytest.raises(RuntimeError):
        registry.register(ToolDescriptor(name="late", description=""), _noop)
    assert registry.sealed


def test_resolve_unknown() -> None:
    with pytest.raises(UnknownToolError) as excinfo:
        ToolRegistry().resolve("missing")

    assert excinfo.value.name == "missing"


def test_descriptor_renders_mcp_schema() -> None:
    descriptor = ToolDescriptor(
        name="t",
        description="d",
        parameters=(
            ParameterSpec(name="a", required=True, description="first"),
            ParameterSpec(name="b", description="second"),
        ),
    )

    tool = descriptor.to_mcp_tool()

    assert tool.name == "t"
    assert tool.inputSchema == {
        "type": "object",
        "properties": {
            "a": {"type": "string", "description": "first"},
            "b": {"type": "string", "description": "second"},
        },
        "required": ["a"],
    }


def test_catalogue(make_admin) -> None:
    admin = make_admin(lambda request: httpx.Response(200))
    registry = build_registry(admin, AdapterGateway.default(admin))

    assert registry.sealed
    assert [d.name for d in registry.descriptors()] == [
        "get_caddy_config",
        "update_caddy_config",
        "convert_caddyfile_to_json",
        "convert_nginx_to_json",
        "convert_yaml_to_json",
        "upstream_proxy_statuses",
    ]
    required = {d.name: d.required_parameters for d in registry.descriptors()}
    assert required == {
        "get_caddy_config": [],
        "update_caddy_config": ["json_config"],
        "convert_caddyfile_to_json": ["caddyfile_config"],
        "convert_nginx_to_json": ["nginx_config"],
        "convert_yaml_to_json": ["yaml_config"],
        "upstream_proxy_statuses": [],
    }
