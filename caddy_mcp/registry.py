"""
Tool Registry
Static catalogue of tool descriptors and the handlers bound to them
"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, List, Mapping, Tuple

from .errors import DuplicateToolError, UnknownToolError
from .models import ToolDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolOutput:
    """Text payload returned by a handler, plus non-fatal warnings"""
    text: str
    warnings: Tuple[str, ...] = ()


ToolHandler = Callable[[Mapping[str, str]], Awaitable[ToolOutput]]


@dataclass(frozen=True)
class RegisteredTool:
    descriptor: ToolDescriptor
    handler: ToolHandler


class ToolRegistry:
    """
    Name to handler lookup table.

    Populated once at startup, then sealed before any transport accepts
    requests. Reads after sealing need no locking.
    """

    def __init__(self):
        self._tools: Dict[str, RegisteredTool] = {}
        self._sealed = False

    def register(self, descriptor: ToolDescriptor, handler: ToolHandler) -> None:
        """Register a tool handler."""
        if self._sealed:
            raise RuntimeError(f"Cannot register {descriptor.name}: registry is sealed")
        if descriptor.name in self._tools:
            raise DuplicateToolError(f"Tool already registered: {descriptor.name}")
        self._tools[descriptor.name] = RegisteredTool(descriptor, handler)
        logger.debug(f"Registered tool: {descriptor.name}")

    def seal(self) -> None:
        self._sealed = True
        logger.info(f"Tool registry ready with {len(self._tools)} tools: {list(self._tools)}")

    @property
    def sealed(self) -> bool:
        return self._sealed

    def resolve(self, name: str) -> RegisteredTool:
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name)
        return tool

    def descriptors(self) -> List[ToolDescriptor]:
        return [tool.descriptor for tool in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
