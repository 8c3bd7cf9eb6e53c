"""RoutingService: maps tool names to their handlers."""

from collections.abc import Awaitable, Callable
from typing import Any

from loguru import logger
from mcp.types import CallToolResult

from ...core.exceptions import NotFoundError

ToolHandler = Callable[[dict[str, Any]], Awaitable[CallToolResult]]


class RoutingService:
    """Dispatches tool calls by name."""

    def __init__(self) -> None:
        self._handlers: dict[str, ToolHandler] = {}

    def register_handler(self, tool_name: str, handler: ToolHandler) -> None:
        self._handlers[tool_name] = handler

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    async def route_tool_call(self, name: str, arguments: dict[str, Any] | None) -> CallToolResult:
        """Run the handler for `name`.

        Raises ``NotFoundError`` for unknown tools.
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise NotFoundError(f"Unknown tool: {name}", {"tool": name})
        logger.debug(f"Routing tool call: {name}")
        return await handler(arguments or {})
