"""Command line interface for Foundation MCP."""
