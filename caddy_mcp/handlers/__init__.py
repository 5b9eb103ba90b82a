"""
Caddy MCP Server Handlers Package
Contains all MCP tool handlers organized by functionality
"""

from .config_handlers import *
from .upstream_handlers import *
from .adapter_handlers import *

__all__ = [
    # Re-export all handler functions
    "handle_get_caddy_config",
    "handle_update_caddy_config",
    "handle_upstream_proxy_statuses",
    "handle_convert_caddyfile_to_json",
    "handle_convert_nginx_to_json",
    "handle_convert_yaml_to_json"
]
