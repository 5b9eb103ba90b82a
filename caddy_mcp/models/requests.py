"""
Request models for the Caddy MCP Server
"""

from typing import Any, Dict
from pydantic import BaseModel, Field


class ToolCallRequest(BaseModel):
    """One invocation of a named tool (transient, never persisted)"""
    name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)
