"""Foundation MCP: codebase intelligence for Foundation for Sites."""

__version__ = "0.1.0"
