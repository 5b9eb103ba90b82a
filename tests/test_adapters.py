from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from caddy_mcp.adapters import AdapterGateway, AdaptResult, ConfigAdapter, Dialect, YAMLAdapter
from caddy_mcp.adapters.caddy_adapter import format_warning
from caddy_mcp.errors import AdaptationError, UnsupportedFormatError

from .conftest import requests_of


class _RecordingAdapter(ConfigAdapter):
    name = "recording"

    def __init__(self) -> None:
        self.calls = 0

    async def adapt(self, body: bytes) -> AdaptResult:
        self.calls += 1
        return AdaptResult(output="{}")


def _yaml_gateway() -> AdapterGateway:
    return AdapterGateway({Dialect.YAML: YAMLAdapter()})


def test_yaml_converts_to_equivalent_json() -> None:
    document = """
apps:
  http:
    servers:
      srv0:
        listen:
          - ":443"
        routes:
          - handle:
              - handler: static_response
                body: hello
"""
    result = asyncio.run(_yaml_gateway().adapt("yaml", document.encode()))

    assert json.loads(result.output) == {
        "apps": {
            "http": {
                "servers": {
                    "srv0": {
                        "listen": [":443"],
                        "routes": [{"handle": [{"handler": "static_response", "body": "hello"}]}],
                    }
                }
            }
        }
    }
    assert result.warnings == []


def test_yaml_extension_fields_are_dropped() -> None:
    document = """
x-listen: &listen [":80"]
apps:
  http:
    servers:
      srv0:
        listen: *listen
"""
    result = asyncio.run(_yaml_gateway().adapt(Dialect.YAML, document.encode()))

    assert json.loads(result.output) == {"apps": {"http": {"servers": {"srv0": {"listen": [":80"]}}}}}


def test_yaml_empty_document() -> None:
    assert asyncio.run(_yaml_gateway().adapt("yaml", b"")).output == "{}"


def test_yaml_timestamps_stay_as_written() -> None:
    document = b"issued: 2024-01-01T10:00:00Z\nday: 2024-01-01\n"

    result = asyncio.run(_yaml_gateway().adapt("yaml", document))

    assert json.loads(result.output) == {"issued": "2024-01-01T10:00:00Z", "day": "2024-01-01"}


@pytest.mark.parametrize("value", [".nan", ".inf", "-.inf"])
def test_yaml_non_finite_floats_are_rejected(value: str) -> None:
    with pytest.raises(AdaptationError) as excinfo:
        asyncio.run(_yaml_gateway().adapt("yaml", f"a: {value}\n".encode()))

    assert str(excinfo.value).startswith("failed to adapt yaml: ")


@pytest.mark.parametrize("document", [b"- a\n- b\n", b"apps: [unclosed\n"])
def test_yaml_errors_carry_dialect_context(document: bytes) -> None:
    with pytest.raises(AdaptationError) as excinfo:
        asyncio.run(_yaml_gateway().adapt("yaml", document))

    assert str(excinfo.value).startswith("failed to adapt yaml: ")


def test_unsupported_dialect_never_reaches_an_adapter() -> None:
    recording = _RecordingAdapter()
    gateway = AdapterGateway({dialect: recording for dialect in Dialect})

    with pytest.raises(UnsupportedFormatError) as excinfo:
        asyncio.run(gateway.adapt("toml", b"[server]"))

    assert str(excinfo.value) == "unsupported format: toml"
    assert recording.calls == 0


def test_caddyfile_uses_admin_adapt_endpoint(make_admin) -> None:
    payload = {
        "result": {"apps": {}},
        "warnings": [{"file": "Caddyfile", "line": 1, "directive": "tls", "message": "deprecated"}],
    }
    admin = make_admin(lambda request: httpx.Response(200, json=payload))

    result = asyncio.run(AdapterGateway.default(admin).adapt("caddyfile", b"example.com\n"))

    assert result.output == '{"apps":{}}'
    assert result.warnings == ["Caddyfile:1: (tls) deprecated"]
    request = requests_of(admin)[0]
    assert request.headers["Content-Type"] == "text/caddyfile"
    assert request.content == b"example.com\n"


def test_nginx_failure_is_wrapped(make_admin) -> None:
    admin = make_admin(
        lambda request: httpx.Response(400, json={"error": "unrecognized config adapter 'nginx'"})
    )

    with pytest.raises(AdaptationError) as excinfo:
        asyncio.run(AdapterGateway.default(admin).adapt("nginx", b"server { listen 80; }"))

    assert str(excinfo.value) == "failed to adapt nginx: unrecognized config adapter 'nginx'"
    assert requests_of(admin)[0].headers["Content-Type"] == "text/nginx"


def test_format_warning_without_location() -> None:
    assert format_warning({"message": "something odd"}) == "something odd"
    assert format_warning({"file": "Caddyfile", "message": "m"}) == "Caddyfile: m"
