"""Dispatcher: tool name + loose arguments -> validated backend call -> result envelope."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from wcc_mcp.errors import ToolError, UnknownToolError
from wcc_mcp.gateway.registry import ToolRegistry
from wcc_mcp.gateway.results import FileDownload, ToolInvocation, ToolResult, save_download
from wcc_mcp.gateway.validation import bind_arguments

if TYPE_CHECKING:
    from wcc_mcp.client.webcenter import WebCenterContentClient

_gateway_log = logging.getLogger("wcc_mcp.gateway")


def render_value(value: Any) -> ToolResult:
    """Wrap a backend return value into a single text block."""
    if isinstance(value, FileDownload):
        save_download(value)
        return ToolResult.success(value.confirmation)
    return ToolResult.success(json.dumps(value, indent=2, ensure_ascii=False))


class Dispatcher:
    """Sole entry point from the transports into the backend.

    Holds no per-request state; the injected client is shared read-only by all
    invocations. ``invoke`` never raises: every failure becomes an ``isError``
    result so callers inspect the payload rather than the transport status.
    """

    def __init__(self, client: "WebCenterContentClient", registry: ToolRegistry) -> None:
        self.client = client
        self.registry = registry

    def invoke(self, request: ToolInvocation) -> ToolResult:
        name = request.tool_name
        _gateway_log.info("tool_call tool=%s", name, extra={"tool": name})
        try:
            definition = self.registry.get(name)
            if definition is None:
                raise UnknownToolError(name)
            arguments = bind_arguments(definition, request.arguments)
            value = definition.handler(self.client, arguments)
            return render_value(value)
        except Exception as e:
            return self._failure(name, e)

    def call_tool(self, name: str, arguments: Any = None) -> ToolResult:
        return self.invoke(ToolInvocation(tool_name=name, arguments=arguments or {}))

    @staticmethod
    def _failure(name: str, error: Exception) -> ToolResult:
        message = error.message if isinstance(error, ToolError) else str(error)
        if not message:
            message = type(error).__name__
        _gateway_log.warning(
            "tool_error tool=%s error_type=%s error=%s",
            name,
            type(error).__name__,
            message,
            extra={
                "tool": name,
                "error_type": type(error).__name__,
                "error_code": getattr(error, "code", None),
                "error_details": getattr(error, "details", None),
            },
        )
        return ToolResult.failure(f"Error executing tool {name}: {message}")
