"""
Tool descriptor models
"""

from typing import Any, Dict, List, Tuple
from pydantic import BaseModel, ConfigDict, Field
from mcp.types import Tool


class ParameterSpec(BaseModel):
    """A single string-typed tool parameter"""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    required: bool = False


class ToolDescriptor(BaseModel):
    """Name, usage description and ordered parameter schema of a tool"""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameters: Tuple[ParameterSpec, ...] = Field(default_factory=tuple)

    @property
    def required_parameters(self) -> List[str]:
        return [p.name for p in self.parameters if p.required]

    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                p.name: {"type": "string", "description": p.description}
                for p in self.parameters
            },
            "required": self.required_parameters,
        }

    def to_mcp_tool(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema())
