"""
Adapters backed by the Caddy admin /adapt endpoint

Caddy ships the Caddyfile adapter; the nginx adapter is a plugin that has to
be compiled into the running server.
"""

from typing import Any, Dict, List

from ..admin import CaddyAdminClient
from .base import AdaptResult, ConfigAdapter


def format_warning(warning: Dict[str, Any]) -> str:
    """Render a Caddy adapter warning as file:line: (directive) message"""
    location = warning.get("file", "")
    if warning.get("line"):
        location = f"{location}:{warning['line']}"
    directive = warning.get("directive")
    message = warning.get("message", "")
    text = f"({directive}) {message}" if directive else message
    return f"{location}: {text}" if location else text


class AdminAPIAdapter(ConfigAdapter):
    """Delegates conversion to Caddy's own adapter through the admin API"""

    def __init__(self, name: str, admin: CaddyAdminClient, content_type: str = ""):
        self.name = name
        self.admin = admin
        self.content_type = content_type or f"text/{name}"

    async def adapt(self, body: bytes) -> AdaptResult:
        output, warnings = await self.admin.adapt(body, self.content_type)
        rendered: List[str] = [format_warning(w) for w in warnings if isinstance(w, dict)]
        return AdaptResult(output=output, warnings=rendered)
