"""
Transport Bindings
Exactly one binding is chosen at startup from the configured transport kind
"""

from typing import Dict, Type

from ..config import ServerConfig, TransportKind
from ..dispatcher import Dispatcher
from .base import NetworkBinding, TransportBinding, configure_keepalive
from .sse import SSEBinding
from .stdio import StdioBinding
from .streamable import StreamableHTTPBinding

BINDINGS: Dict[TransportKind, Type[TransportBinding]] = {
    TransportKind.STDIO: StdioBinding,
    TransportKind.SSE: SSEBinding,
    TransportKind.HTTP_STREAM: StreamableHTTPBinding,
}


def create_binding(dispatcher: Dispatcher, config: ServerConfig) -> TransportBinding:
    return BINDINGS[config.transport](dispatcher, config)


__all__ = [
    "BINDINGS",
    "NetworkBinding",
    "SSEBinding",
    "StdioBinding",
    "StreamableHTTPBinding",
    "TransportBinding",
    "configure_keepalive",
    "create_binding",
]
