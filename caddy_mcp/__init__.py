"""
Caddy MCP Server
MCP tools for inspecting and updating a running Caddy server
"""

__version__ = "1.0.0"
