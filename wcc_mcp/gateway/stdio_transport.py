"""Duplex-stream front end built on the MCP SDK low-level server."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

import anyio
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import Resource, TextContent, Tool
from pydantic import AnyUrl

from wcc_mcp import __version__
from wcc_mcp.gateway.constants import SERVER_NAME
from wcc_mcp.gateway.resources import RESOURCE_MIME_TYPE

if TYPE_CHECKING:
    from wcc_mcp.gateway.server import WebCenterMCPGateway


class ToolCallFailed(Exception):
    """Carries a dispatcher failure text; the SDK reports it with ``isError: true``."""


def build_mcp_server(gateway: "WebCenterMCPGateway") -> Server:
    """Wire the gateway's catalog, dispatcher and resources into an SDK server.

    Each response carries the id of its request, but the SDK handles every message
    in its own task and tool calls run on worker threads, so responses to pipelined
    requests may be written in completion order rather than arrival order.
    """
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> list[Tool]:
        """List available WebCenter Content tools."""
        return [Tool.model_validate(wire) for wire in gateway.list_tools()]

    # Input validation stays with the dispatcher so both front ends report the same text.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        result = await anyio.to_thread.run_sync(gateway.call_tool, name, arguments)
        if result.is_error:
            raise ToolCallFailed(result.text)
        return [TextContent(type="text", text=block.text) for block in result.content]

    @server.list_resources()
    async def handle_list_resources() -> list[Resource]:
        return [Resource.model_validate(wire) for wire in gateway.list_resources()]

    @server.read_resource()
    async def handle_read_resource(uri: AnyUrl) -> Iterable[ReadResourceContents]:
        text = await anyio.to_thread.run_sync(gateway.read_resource, str(uri).rstrip("/"))
        return [ReadResourceContents(content=text, mime_type=RESOURCE_MIME_TYPE)]

    return server
