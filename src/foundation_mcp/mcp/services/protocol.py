"""ProtocolService: turns handler results into MCP tool responses."""

import json
from typing import Any

from mcp.types import CallToolResult, TextContent
from pydantic import BaseModel

from ...core.exceptions import FoundationMCPError


class ProtocolService:
    """Builds `CallToolResult`s; payloads are JSON text with camelCase keys."""

    @staticmethod
    def to_payload(value: Any) -> Any:
        if isinstance(value, BaseModel):
            return value.model_dump(mode="json", by_alias=True)
        if isinstance(value, (list, tuple)):
            return [ProtocolService.to_payload(item) for item in value]
        if isinstance(value, dict):
            return {key: ProtocolService.to_payload(item) for key, item in value.items()}
        return value

    def build_text_response(self, text: str) -> CallToolResult:
        return CallToolResult(content=[TextContent(type="text", text=text)], isError=False)

    def build_json_response(self, value: Any) -> CallToolResult:
        return self.build_text_response(json.dumps(self.to_payload(value), indent=2))

    def build_error_response(self, error: FoundationMCPError) -> CallToolResult:
        return CallToolResult(
            content=[TextContent(type="text", text=json.dumps(error.to_dict(), indent=2))],
            isError=True,
        )
