"""
Adapter Handlers for the Caddy MCP Server
Convert Caddyfile, nginx and YAML configurations to Caddy JSON
"""

from typing import Mapping

from ..adapters import AdapterGateway, Dialect
from ..registry import ToolOutput


async def _convert(gateway: AdapterGateway, dialect: Dialect, config: str) -> ToolOutput:
    result = await gateway.adapt(dialect, config.encode("utf-8"))
    return ToolOutput(text=result.output, warnings=tuple(result.warnings))


async def handle_convert_caddyfile_to_json(arguments: Mapping[str, str], gateway: AdapterGateway) -> ToolOutput:
    """Handle convert_caddyfile_to_json tool"""
    return await _convert(gateway, Dialect.CADDYFILE, arguments["caddyfile_config"])


async def handle_convert_nginx_to_json(arguments: Mapping[str, str], gateway: AdapterGateway) -> ToolOutput:
    """Handle convert_nginx_to_json tool"""
    return await _convert(gateway, Dialect.NGINX, arguments["nginx_config"])


async def handle_convert_yaml_to_json(arguments: Mapping[str, str], gateway: AdapterGateway) -> ToolOutput:
    """Handle convert_yaml_to_json tool"""
    return await _convert(gateway, Dialect.YAML, arguments["yaml_config"])
