"""
Caddy MCP Server Models Package
Contains tool descriptor, request and response models
"""

from .requests import *
from .responses import *
from .tools import *

__all__ = [
    "ParameterSpec",
    "ToolDescriptor",
    "ToolCallRequest",
    "TextResult",
    "ErrorResult",
    "ToolResult",
    "UpstreamError",
    "ToolCallResponse",
    "ToolListResponse"
]
