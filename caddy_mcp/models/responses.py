"""
Response models for the Caddy MCP Server

TextResult and ErrorResult form the result envelope every invocation
produces exactly one of.
"""

from typing import List, Literal, Optional, Union
from pydantic import BaseModel, Field
from mcp.types import Tool, TextContent


class TextResult(BaseModel):
    """Successful tool result"""
    kind: Literal["text"] = "text"
    content: str
    warnings: List[str] = Field(default_factory=list)

    def to_text_content(self) -> List[TextContent]:
        blocks = [TextContent(type="text", text=self.content)]
        if self.warnings:
            lines = "\n".join(f"- {w}" for w in self.warnings)
            blocks.append(TextContent(type="text", text=f"Warnings:\n{lines}"))
        return blocks


class ErrorResult(BaseModel):
    """Failed invocation, surfaced by the transports as a protocol-level error"""
    kind: Literal["error"] = "error"
    message: str
    code: int
    reason: str


ToolResult = Union[TextResult, ErrorResult]


class UpstreamError(BaseModel):
    """Admin API rejection, returned to the agent as data"""
    status_code: int
    message: str


class ToolCallResponse(BaseModel):
    """Response model for HTTP tool calls"""
    result: List[TextContent]
    success: bool
    error: Optional[str] = None
    code: Optional[int] = None


class ToolListResponse(BaseModel):
    """Response model for listing available tools"""
    tools: List[Tool]
