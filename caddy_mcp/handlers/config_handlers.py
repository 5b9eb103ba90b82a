"""
Config Handlers for the Caddy MCP Server
Handles reading and replacing the running Caddy configuration
"""

import logging
from typing import Mapping

from ..admin import CaddyAdminClient, LoadStatus
from ..errors import AdminAPIError
from ..models import UpstreamError
from ..registry import ToolOutput

logger = logging.getLogger(__name__)


async def handle_get_caddy_config(arguments: Mapping[str, str], admin: CaddyAdminClient) -> ToolOutput:
    """Handle get_caddy_config tool"""
    return ToolOutput(text=await admin.get_config())


async def handle_update_caddy_config(arguments: Mapping[str, str], admin: CaddyAdminClient) -> ToolOutput:
    """Handle update_caddy_config tool

    A rejection by Caddy is returned as a serialized UpstreamError so the
    agent can read the reason and retry; only an unreachable admin API is an
    error.
    """
    json_config = arguments["json_config"]
    outcome = await admin.load_config(json_config)

    if outcome.status is LoadStatus.UNREACHABLE:
        raise AdminAPIError(f"failed to update Caddy configuration: {outcome.error}") from outcome.error

    if outcome.status is LoadStatus.REJECTED:
        rejection = UpstreamError(status_code=outcome.status_code, message=outcome.body)
        return ToolOutput(text=rejection.model_dump_json())

    logger.info("✅ Caddy configuration updated")
    # /load answers with an empty body, the submitted config is the new one
    return ToolOutput(text=outcome.body or json_config)
