#!/usr/bin/env python3
"""
Configuration for the Caddy MCP Server
Contains configuration defaults, logging setup and command line parsing
"""

import argparse
import logging
import os
from enum import Enum
from typing import List, Optional, Sequence

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError

# Load environment variables
load_dotenv()

# Configure logging (stderr, stdout is reserved for the stdio transport)
logging.basicConfig(level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO))
logger = logging.getLogger(__name__)

# Configuration Constants
MCP_SERVER_NAME = os.getenv("MCP_SERVER_NAME", "caddy-mcp")
MCP_SERVER_VERSION = os.getenv("MCP_SERVER_VERSION", "1.0.0")

DEFAULT_ADMIN_URL = "http://127.0.0.1:2019"
DEFAULT_TRANSPORT = "stdio"
DEFAULT_PORT = 7000
DEFAULT_HOST = "0.0.0.0"

# Admin API requests are never retried
REQUEST_TIMEOUT = 10.0
KEEPALIVE_INTERVAL = 10.0

# CORS Configuration (MCP inspector runs in the browser)
DEFAULT_CORS_ORIGINS = "http://localhost:6274,http://127.0.0.1:6274"


class TransportKind(str, Enum):
    STDIO = "stdio"
    SSE = "sse"
    HTTP_STREAM = "httpstream"


class ServerConfig(BaseModel):
    """Process configuration, read once at startup and shared read-only"""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_ADMIN_URL
    transport: TransportKind = TransportKind.STDIO
    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    cors_origins: List[str] = Field(default_factory=lambda: DEFAULT_CORS_ORIGINS.split(","))
    keepalive_interval: float = Field(default=KEEPALIVE_INTERVAL, gt=0)
    request_timeout: float = Field(default=REQUEST_TIMEOUT, gt=0)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="caddy-mcp",
        description="MCP server for managing a Caddy server through its admin API",
    )
    parser.add_argument(
        "--url",
        default=os.getenv("CADDY_ADMIN_URL", DEFAULT_ADMIN_URL),
        help="The URL of the caddy admin API",
    )
    parser.add_argument(
        "--transport",
        default=os.getenv("MCP_TRANSPORT", DEFAULT_TRANSPORT),
        help="The transport to use for the MCP server (stdio, sse, httpstream)",
    )
    parser.add_argument(
        "--port",
        default=os.getenv("MCP_SERVER_PORT", str(DEFAULT_PORT)),
        help="Port to run the MCP server on (sse and httpstream only)",
    )
    parser.add_argument(
        "--host",
        default=os.getenv("MCP_SERVER_HOST", DEFAULT_HOST),
        help="Interface to bind the MCP server to (sse and httpstream only)",
    )
    return parser


def load_config(argv: Optional[Sequence[str]] = None) -> ServerConfig:
    """Build the ServerConfig from command line flags and environment variables.

    Flags take precedence over the environment. Raises ConfigurationError for
    an invalid port or transport.
    """
    args = _build_parser().parse_args(argv)

    try:
        port = int(args.port)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid port number: {args.port!r}") from None
    if port <= 0 or port > 65535:
        raise ConfigurationError(f"Invalid port number: {port}")

    try:
        transport = TransportKind(args.transport)
    except ValueError:
        choices = ", ".join(kind.value for kind in TransportKind)
        raise ConfigurationError(f"Invalid transport {args.transport!r} (expected one of: {choices})") from None

    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",") if o.strip()]

    try:
        return ServerConfig(
            base_url=args.url.rstrip("/"),
            transport=transport,
            host=args.host,
            port=port,
            cors_origins=origins,
        )
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e
