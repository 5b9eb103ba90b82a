"""
Format Adapter Gateway
Uniform entry point to the Caddyfile, YAML and nginx adapters
"""

import logging
from enum import Enum
from typing import Dict, Mapping, Optional, Union

from ..admin import CaddyAdminClient
from ..errors import AdaptationError, CaddyMCPError, UnsupportedFormatError
from .base import AdaptResult, ConfigAdapter
from .caddy_adapter import AdminAPIAdapter
from .yaml_adapter import YAMLAdapter

logger = logging.getLogger(__name__)


class Dialect(str, Enum):
    CADDYFILE = "caddyfile"
    YAML = "yaml"
    NGINX = "nginx"


class AdapterGateway:
    """Validates the dialect name and wraps adapter failures with its context"""

    def __init__(self, adapters: Mapping[Dialect, ConfigAdapter]):
        self._adapters: Dict[Dialect, ConfigAdapter] = dict(adapters)

    @classmethod
    def default(cls, admin: CaddyAdminClient) -> "AdapterGateway":
        return cls({
            Dialect.CADDYFILE: AdminAPIAdapter("caddyfile", admin),
            Dialect.YAML: YAMLAdapter(),
            Dialect.NGINX: AdminAPIAdapter("nginx", admin),
        })

    async def adapt(self, dialect: Union[Dialect, str], body: bytes) -> AdaptResult:
        try:
            key = Dialect(dialect)
        except ValueError:
            raise UnsupportedFormatError(str(dialect)) from None
        adapter: Optional[ConfigAdapter] = self._adapters.get(key)
        if adapter is None:
            raise UnsupportedFormatError(key.value)

        try:
            result = await adapter.adapt(body)
        except (CaddyMCPError, ValueError) as e:
            raise AdaptationError(key.value, str(e)) from e

        for warning in result.warnings:
            logger.warning(f"{key.value} adapter warning: {warning}")
        return result


__all__ = [
    "AdaptResult",
    "AdapterGateway",
    "AdminAPIAdapter",
    "ConfigAdapter",
    "Dialect",
    "YAMLAdapter",
]
