"""Custom exception hierarchy for Foundation MCP."""

from typing import Any


class FoundationMCPError(Exception):
    """Base exception carrying a stable error code for protocol payloads."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Structured payload sent back to MCP clients (no stack trace)."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class ParseError(FoundationMCPError):
    """Source text could not be parsed by the structural grammar."""

    code = "PARSE_ERROR"

    def to_dict(self) -> dict[str, Any]:
        # The offending source can be large; clients only need the message.
        payload = super().to_dict()
        payload["error"]["details"] = {
            k: v for k, v in self.details.items() if k != "code"
        }
        return payload


class NotFoundError(FoundationMCPError):
    """A catalog entry, tool or resource does not exist."""

    code = "NOT_FOUND"


class ValidationError(FoundationMCPError):
    """Caller supplied parameters failed schema validation."""

    code = "VALIDATION_ERROR"


class ConfigurationError(FoundationMCPError):
    """Server configuration is missing or inconsistent."""

    code = "CONFIGURATION_ERROR"
