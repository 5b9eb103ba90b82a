"""
Transport binding interface
"""

import logging
import os
from abc import ABC, abstractmethod

import uvicorn
from fastapi import FastAPI
from sse_starlette.sse import EventSourceResponse

from ..config import ServerConfig
from ..dispatcher import Dispatcher

logger = logging.getLogger(__name__)


class TransportBinding(ABC):
    """
    Adapts the dispatcher to one wire transport.

    Bindings own connection lifecycle only; every tool call goes through the
    shared Dispatcher.
    """

    name: str = ""

    def __init__(self, dispatcher: Dispatcher, config: ServerConfig):
        self.dispatcher = dispatcher
        self.config = config

    @abstractmethod
    async def serve(self) -> None:
        """Serve until the transport is closed or the process is stopped."""
        ...


def configure_keepalive(interval: float) -> float:
    """Set the ping interval of every event stream the MCP SDK opens.

    The SDK builds its EventSourceResponses without a ping argument, so the
    class default is process-wide. Only one binding runs per process.
    Returns the previous interval.
    """
    previous = EventSourceResponse.DEFAULT_PING_INTERVAL
    EventSourceResponse.DEFAULT_PING_INTERVAL = interval
    return previous


class NetworkBinding(TransportBinding):
    """Binding served over HTTP by uvicorn"""

    @abstractmethod
    def build_app(self) -> FastAPI:
        ...

    async def serve(self) -> None:
        previous_interval = configure_keepalive(self.config.keepalive_interval)
        app = self.build_app()

        logger.info(f"🚀 Starting MCP {self.name} server on {self.config.host}:{self.config.port}")
        config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_level=os.getenv("LOG_LEVEL", "INFO").lower(),
        )
        server_instance = uvicorn.Server(config)
        try:
            await server_instance.serve()
        finally:
            configure_keepalive(previous_interval)
