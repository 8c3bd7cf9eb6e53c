"""Configuration for Foundation MCP."""

from .settings import CacheConfig, ServerConfig, load_config

__all__ = ["CacheConfig", "ServerConfig", "load_config"]
