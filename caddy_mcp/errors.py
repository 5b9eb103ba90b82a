"""
Exception hierarchy for the Caddy MCP server

Every failure a tool invocation can produce derives from CaddyMCPError and
carries the JSON-RPC error code the transports report it with.
"""

from mcp.types import INTERNAL_ERROR, INVALID_PARAMS


class CaddyMCPError(Exception):
    """Base class for errors surfaced to the calling agent"""

    code: int = INTERNAL_ERROR
    reason: str = "internal_error"


class ConfigurationError(CaddyMCPError):
    """Invalid process configuration (fatal at startup)"""

    reason = "configuration"


class DuplicateToolError(ValueError):
    """Two tool descriptors were registered under the same name"""


# Protocol errors

class ToolError(CaddyMCPError):
    code = INVALID_PARAMS
    reason = "invalid_request"


class UnknownToolError(ToolError):
    reason = "unknown_tool"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class MissingArgumentError(ToolError):
    reason = "missing_argument"

    def __init__(self, tool: str, argument: str):
        self.tool = tool
        self.argument = argument
        super().__init__(f"Missing required argument '{argument}' for tool {tool}")


class InvalidArgumentError(ToolError):
    reason = "invalid_argument"

    def __init__(self, tool: str, argument: str, detail: str):
        self.tool = tool
        self.argument = argument
        super().__init__(f"Invalid argument '{argument}' for tool {tool}: {detail}")


# Admin API errors

class AdminAPIError(CaddyMCPError):
    """The Caddy admin API could not be reached or refused a read"""

    reason = "admin_api"


class NoConfigLoadedError(AdminAPIError):
    reason = "no_config"

    def __init__(self, message: str = "no configuration currently loaded"):
        super().__init__(message)


# Format adapter errors

class AdapterError(CaddyMCPError):
    reason = "adapter"


class UnsupportedFormatError(AdapterError):
    reason = "unsupported_format"

    def __init__(self, dialect: str):
        self.dialect = dialect
        super().__init__(f"unsupported format: {dialect}")


class AdaptationError(AdapterError):
    def __init__(self, dialect: str, underlying: str):
        self.dialect = dialect
        super().__init__(f"failed to adapt {dialect}: {underlying}")
