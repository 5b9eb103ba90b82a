"""
Request Dispatcher
Resolves an invocation in the registry, validates its arguments, runs the
handler and normalizes the outcome into a result envelope
"""

import logging
from typing import Dict, Optional

from mcp.types import INTERNAL_ERROR

from .errors import CaddyMCPError, InvalidArgumentError, MissingArgumentError
from .models import ErrorResult, TextResult, ToolCallRequest, ToolResult
from .registry import RegisteredTool, ToolRegistry

logger = logging.getLogger(__name__)


def _error_result(error: CaddyMCPError) -> ErrorResult:
    return ErrorResult(message=str(error), code=error.code, reason=error.reason)


class Dispatcher:
    """Transport-agnostic tool invocation.

    Holds no per-invocation state, so concurrent dispatches are safe.
    """

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    @staticmethod
    def _validate(tool: RegisteredTool, arguments: Dict[str, object]) -> Dict[str, str]:
        descriptor = tool.descriptor
        for name in descriptor.required_parameters:
            if name not in arguments:
                raise MissingArgumentError(descriptor.name, name)

        validated: Dict[str, str] = {}
        for param in descriptor.parameters:
            if param.name not in arguments:
                continue
            value = arguments[param.name]
            if not isinstance(value, str):
                raise InvalidArgumentError(descriptor.name, param.name, f"expected string, got {type(value).__name__}")
            validated[param.name] = value
        return validated

    async def dispatch(self, invocation: ToolCallRequest, trace_id: Optional[str] = None) -> ToolResult:
        prefix = f"[TRACE:{trace_id}] " if trace_id else ""
        logger.info(f"{prefix}Executing tool: {invocation.name}")

        try:
            tool = self.registry.resolve(invocation.name)
            arguments = self._validate(tool, invocation.arguments)
        except CaddyMCPError as e:
            logger.warning(f"{prefix}Rejected call to {invocation.name}: {e}")
            return _error_result(e)

        try:
            output = await tool.handler(arguments)
        except CaddyMCPError as e:
            logger.error(f"{prefix}Error executing tool {invocation.name}: {e}")
            return _error_result(e)
        except Exception as e:
            logger.exception(f"{prefix}Unexpected error executing tool {invocation.name}")
            return ErrorResult(message=f"Error: {e}", code=INTERNAL_ERROR, reason="internal_error")

        return TextResult(content=output.text, warnings=list(output.warnings))
