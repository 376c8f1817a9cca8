"""Exception types shared by the WebCenter Content client and the MCP gateway."""

from __future__ import annotations

from typing import Any


class WebCenterMCPError(Exception):
    """Base class for all adapter errors."""


class ConfigurationError(WebCenterMCPError):
    """Fatal startup problem: missing credentials, bad settings, broken catalog."""


class DuplicateToolError(ConfigurationError):
    """Two tool definitions were registered under the same name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Duplicate tool registration: {name}")
        self.name = name


class ToolError(WebCenterMCPError):
    """Tool-level failure, reported back to the caller as an ``isError`` result.

    ``code`` is a stable machine-readable identifier; ``details`` is always a dict.
    """

    code = "TOOL_ERROR"

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        safe_message = message.strip() if isinstance(message, str) else ""
        super().__init__(safe_message or "Unknown tool error")
        self.message = safe_message or "Unknown tool error"
        self.details = details or {}


class UnknownToolError(ToolError):
    code = "UNKNOWN_TOOL"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}", details={"tool": name})
        self.name = name


class MissingArgumentError(ToolError):
    code = "MISSING_ARGUMENT"

    def __init__(self, field_name: str) -> None:
        super().__init__(
            f"Missing required argument: {field_name}", details={"field": field_name}
        )
        self.field_name = field_name


class InvalidArgumentError(ToolError):
    code = "INVALID_ARGUMENT"

    def __init__(self, field_name: str, reason: str) -> None:
        super().__init__(f"Invalid argument {field_name}: {reason}", details={"field": field_name})
        self.field_name = field_name


class BackendError(ToolError):
    """The WebCenter Content server could not be reached or answered non-2xx."""

    code = "BACKEND_ERROR"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message, details={"status_code": status_code})
        self.status_code = status_code
        self.body = body


class ResourceError(WebCenterMCPError):
    """A resource URI could not be read."""

    def __init__(self, uri: str, message: str) -> None:
        super().__init__(f"Failed to read resource {uri}: {message}")
        self.uri = uri
