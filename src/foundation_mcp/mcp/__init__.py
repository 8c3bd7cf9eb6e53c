"""MCP server integration for Foundation MCP."""

from .server import FoundationMCPServer, create_mcp_server, run_mcp_server

__all__ = ["FoundationMCPServer", "create_mcp_server", "run_mcp_server"]
