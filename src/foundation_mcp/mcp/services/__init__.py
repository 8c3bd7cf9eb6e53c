"""MCP Server Services: Session, Routing, and Protocol management."""

from .session import SessionService
from .router import RoutingService
from .protocol import ProtocolService

__all__ = [
    "SessionService",
    "RoutingService",
    "ProtocolService",
]
