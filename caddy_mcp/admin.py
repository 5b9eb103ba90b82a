"""
Caddy admin API client

Thin wrappers around the admin endpoints the tools need. A single
httpx.AsyncClient with a fixed timeout is shared by every invocation and no
request is ever retried.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

import httpx

from .config import REQUEST_TIMEOUT
from .errors import AdminAPIError, NoConfigLoadedError

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    APPLIED = "applied"
    REJECTED = "rejected"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class LoadOutcome:
    """Result of POST /load.

    REJECTED means the admin API answered with a non-200 status, UNREACHABLE
    means no HTTP response was received at all.
    """
    status: LoadStatus
    status_code: Optional[int] = None
    body: str = ""
    error: Optional[Exception] = None


def _status_text(response: httpx.Response) -> str:
    return f"{response.status_code} {response.reason_phrase}".strip()


class CaddyAdminClient:
    """HTTP client for communicating with the Caddy admin API"""

    def __init__(
        self,
        base_url: str,
        timeout: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def _send(self, method: str, endpoint: str, **kwargs: Any) -> httpx.Response:
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"Caddy admin request: {method} {url}")
        try:
            return await self.client.request(method, url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Caddy admin request {method} {url} failed: {e}")
            raise AdminAPIError(f"{method} {url}: {e}") from e

    async def get_config(self) -> str:
        """GET /config/ - the running JSON configuration"""
        response = await self._send("GET", "/config/", headers={"Accept": "application/json"})
        if response.status_code != httpx.codes.OK:
            raise AdminAPIError(f"failed to get Caddy configuration: {_status_text(response)}")
        if not response.content:
            raise NoConfigLoadedError()
        return response.text

    async def load_config(self, json_config: str) -> LoadOutcome:
        """POST /load - replace the running configuration"""
        url = f"{self.base_url}/load"
        try:
            response = await self.client.post(
                url,
                content=json_config.encode("utf-8"),
                headers={"Content-Type": "application/json"},
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Caddy admin request POST {url} failed: {e}")
            return LoadOutcome(status=LoadStatus.UNREACHABLE, error=e)

        if response.status_code != httpx.codes.OK:
            logger.warning(f"Caddy rejected new configuration: {_status_text(response)}")
            return LoadOutcome(
                status=LoadStatus.REJECTED,
                status_code=response.status_code,
                body=response.text,
            )
        return LoadOutcome(status=LoadStatus.APPLIED, status_code=response.status_code, body=response.text)

    async def get_upstream_statuses(self) -> str:
        """GET /reverse_proxy/upstreams - health of the configured backends"""
        response = await self._send("GET", "/reverse_proxy/upstreams")
        if response.status_code != httpx.codes.OK:
            raise AdminAPIError(f"failed to get upstream proxy statuses: {_status_text(response)}")
        return response.text

    async def adapt(self, body: bytes, content_type: str) -> Tuple[str, List[Dict[str, Any]]]:
        """POST /adapt - convert a config to JSON with one of Caddy's adapters.

        Caddy picks the adapter from the MIME subtype (text/caddyfile uses
        the caddyfile adapter) and answers {"result": ..., "warnings": [...]}.
        Returns the compact JSON result and the warning objects.
        """
        response = await self._send("POST", "/adapt", content=body, headers={"Content-Type": content_type})
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code != httpx.codes.OK:
            message = payload.get("error") if isinstance(payload, dict) else None
            raise AdminAPIError(message or f"{_status_text(response)}: {response.text}")
        if not isinstance(payload, dict) or "result" not in payload:
            raise AdminAPIError(f"unexpected /adapt response: {response.text[:200]}")

        result = json.dumps(payload["result"], separators=(",", ":"))
        return result, payload.get("warnings") or []

    async def check_connection(self) -> bool:
        """Probe the admin API, logging (never raising) the outcome"""
        try:
            await self.client.get(f"{self.base_url}/config/", headers={"Accept": "application/json"})
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"⚠️  Could not connect to Caddy admin API at {self.base_url}: {e}")
            return False
        logger.info(f"✅ Connected to Caddy admin API at {self.base_url}")
        return True

    async def aclose(self) -> None:
        await self.client.aclose()
