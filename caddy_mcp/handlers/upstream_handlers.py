"""
Upstream Handlers for the Caddy MCP Server
"""

from typing import Mapping

from ..admin import CaddyAdminClient
from ..registry import ToolOutput


async def handle_upstream_proxy_statuses(arguments: Mapping[str, str], admin: CaddyAdminClient) -> ToolOutput:
    """Handle upstream_proxy_statuses tool"""
    return ToolOutput(text=await admin.get_upstream_statuses())
