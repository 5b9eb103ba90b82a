"""
Tool catalogue
Descriptors for every tool the server exposes and the registry builder
"""

from functools import partial

from .adapters import AdapterGateway
from .admin import CaddyAdminClient
from .handlers import (
    handle_get_caddy_config, handle_update_caddy_config,
    handle_upstream_proxy_statuses, handle_convert_caddyfile_to_json,
    handle_convert_nginx_to_json, handle_convert_yaml_to_json
)
from .models import ParameterSpec, ToolDescriptor
from .registry import ToolRegistry

SERVER_INSTRUCTIONS = """This server is a tool for managing a caddy server instance. It should be used to get the current caddy configuration in JSON format and describe the configuration in a human readable format.
It can also be used to update the caddy configuration in JSON format using the update_caddy_config tool.

Best Practices:
1. ALWAYS provide the full JSON configuration to the update_caddy_config tool.
2. If the user asks to add a new section to the caddy configuration, you should first get the current caddy configuration using the get_caddy_config tool and then add the new section to the configuration before using the update_caddy_config tool.
"""

GET_CADDY_CONFIG = ToolDescriptor(
    name="get_caddy_config",
    description=(
        "Use the get_caddy_config tool to get the current caddy server configuration in JSON format.\n\n"
        "The caddy server will always return a JSON configuration unless there is no configuration currently loaded."
    ),
)

UPDATE_CADDY_CONFIG = ToolDescriptor(
    name="update_caddy_config",
    description=(
        "Use the update_caddy_config tool to update the caddy server configuration in JSON format.\n\n"
        "Notes:\n"
        "- You must provide a valid JSON configuration to update the caddy server configuration.\n"
        "- You must provide the full JSON configuration and not just a partial configuration.\n"
        "- You can use the get_caddy_config tool to get the current caddy server configuration in JSON format.\n"
        "- If the user provides a YAML configuration, you must convert it to JSON first using the convert_yaml_to_json tool.\n"
        "- If the user provides a Nginx configuration, you must convert it to JSON first using the convert_nginx_to_json tool.\n"
        "- If the user provides a Caddyfile configuration, you must convert it to JSON first using the convert_caddyfile_to_json tool.\n"
        "- If caddy rejects the configuration the result is a JSON object with status_code and message fields."
    ),
    parameters=(
        ParameterSpec(
            name="json_config",
            required=True,
            description="The caddy server JSON configuration to update the caddy server with",
        ),
    ),
)

CONVERT_CADDYFILE_TO_JSON = ToolDescriptor(
    name="convert_caddyfile_to_json",
    description=(
        "Use the convert_caddyfile_to_json tool to convert a caddy server Caddyfile to JSON configuration.\n\n"
        "Notes:\n"
        "- You must provide a valid Caddyfile configuration to convert to JSON."
    ),
    parameters=(
        ParameterSpec(name="caddyfile_config", required=True, description="The Caddyfile configuration to convert to JSON"),
    ),
)

CONVERT_NGINX_TO_JSON = ToolDescriptor(
    name="convert_nginx_to_json",
    description=(
        "Use the convert_nginx_to_json tool to convert a caddy server Nginx configuration to JSON configuration.\n\n"
        "Notes:\n"
        "- You must provide a valid Nginx configuration to convert to JSON."
    ),
    parameters=(
        ParameterSpec(name="nginx_config", required=True, description="The Nginx configuration to convert to JSON"),
    ),
)

CONVERT_YAML_TO_JSON = ToolDescriptor(
    name="convert_yaml_to_json",
    description=(
        "Use the convert_yaml_to_json tool to convert a caddy server YAML configuration to JSON configuration.\n\n"
        "Notes:\n"
        "- You must provide a valid YAML configuration to convert to JSON."
    ),
    parameters=(
        ParameterSpec(name="yaml_config", required=True, description="The YAML configuration to convert to JSON"),
    ),
)

UPSTREAM_PROXY_STATUSES = ToolDescriptor(
    name="upstream_proxy_statuses",
    description=(
        "Get the current status of the configured reverse proxy upstreams (backends) as a JSON document. "
        "This can be used to confirm that the backend proxy servers are running and responding to requests."
    ),
)


def build_registry(admin: CaddyAdminClient, gateway: AdapterGateway) -> ToolRegistry:
    """Register every tool against the shared admin client and adapter gateway, then seal"""
    registry = ToolRegistry()
    registry.register(GET_CADDY_CONFIG, partial(handle_get_caddy_config, admin=admin))
    registry.register(UPDATE_CADDY_CONFIG, partial(handle_update_caddy_config, admin=admin))
    registry.register(CONVERT_CADDYFILE_TO_JSON, partial(handle_convert_caddyfile_to_json, gateway=gateway))
    registry.register(CONVERT_NGINX_TO_JSON, partial(handle_convert_nginx_to_json, gateway=gateway))
    registry.register(CONVERT_YAML_TO_JSON, partial(handle_convert_yaml_to_json, gateway=gateway))
    registry.register(UPSTREAM_PROXY_STATUSES, partial(handle_upstream_proxy_statuses, admin=admin))
    registry.seal()
    return registry
