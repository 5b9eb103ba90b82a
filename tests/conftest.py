from __future__ import annotations

from typing import Callable, List

import httpx
import pytest

from caddy_mcp.adapters import AdapterGateway
from caddy_mcp.admin import CaddyAdminClient
from caddy_mcp.catalog import build_registry
from caddy_mcp.dispatcher import Dispatcher

ADMIN_URL = "http://caddy.test:2019"

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served"""

    def __init__(self, handler: Handler) -> None:
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def make_admin() -> Callable[[Handler], CaddyAdminClient]:
    def factory(handler: Handler) -> CaddyAdminClient:
        return CaddyAdminClient(ADMIN_URL, transport=RecordingTransport(handler))

    return factory


@pytest.fixture
def make_dispatcher(make_admin) -> Callable[[Handler], Dispatcher]:
    def factory(handler: Handler) -> Dispatcher:
        admin = make_admin(handler)
        return Dispatcher(build_registry(admin, AdapterGateway.default(admin)))

    return factory


def admin_of(dispatcher: Dispatcher) -> CaddyAdminClient:
    handler = dispatcher.registry.resolve("get_caddy_config").handler
    return handler.keywords["admin"]


def requests_of(admin: CaddyAdminClient) -> List[httpx.Request]:
    return admin.client._transport.requests
