"""Core indexing, caching and data model for Foundation MCP."""
