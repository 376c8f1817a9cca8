"""WebCenter Content MCP Gateway Server - entry points for stdio and HTTP modes."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.stdio import stdio_server
from mcp.shared.version import SUPPORTED_PROTOCOL_VERSIONS
from mcp.types import LATEST_PROTOCOL_VERSION

from wcc_mcp import __version__
from wcc_mcp.client.webcenter import WebCenterContentClient
from wcc_mcp.errors import ConfigurationError
from wcc_mcp.gateway.config import MODES, ServerConfig, WebCenterConfig
from wcc_mcp.gateway.constants import SERVER_NAME, SERVER_TITLE
from wcc_mcp.gateway.dispatcher import Dispatcher
from wcc_mcp.gateway.registry import ToolRegistry
from wcc_mcp.gateway.resources import ResourceCatalog
from wcc_mcp.gateway.results import ToolResult
from wcc_mcp.gateway.tools import build_registry

_gateway_log = logging.getLogger("wcc_mcp.gateway")

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class WebCenterMCPGateway:
    """Transport-independent facade shared by both front ends.

    The client is built once by the caller and injected; nothing here is created
    lazily, so concurrent requests never race on construction.
    """

    def __init__(
        self,
        client: WebCenterContentClient,
        registry: ToolRegistry | None = None,
    ) -> None:
        self.client = client
        self.registry = registry if registry is not None else build_registry()
        self.dispatcher = Dispatcher(client, self.registry)
        self.resources = ResourceCatalog(client)

    @classmethod
    def from_config(cls, config: WebCenterConfig) -> "WebCenterMCPGateway":
        return cls(WebCenterContentClient.from_config(config))

    @classmethod
    def from_env(cls) -> "WebCenterMCPGateway":
        return cls.from_config(WebCenterConfig.from_env())

    def initialize(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Handshake payload; echoes the client's protocol version when supported."""
        requested = (params or {}).get("protocolVersion")
        if isinstance(requested, str) and requested in SUPPORTED_PROTOCOL_VERSIONS:
            protocol_version = requested
        else:
            protocol_version = LATEST_PROTOCOL_VERSION
        return {
            "protocolVersion": protocol_version,
            "capabilities": {"tools": {}, "resources": {}},
            "serverInfo": {"name": SERVER_NAME, "title": SERVER_TITLE, "version": __version__},
        }

    def list_tools(self) -> list[dict[str, Any]]:
        return [definition.to_wire() for definition in self.registry.list_tools()]

    def call_tool(self, name: str, arguments: Any = None) -> ToolResult:
        return self.dispatcher.call_tool(name, arguments)

    def list_resources(self) -> list[dict[str, Any]]:
        return [resource.to_wire() for resource in self.resources.list_resources()]

    def read_resource(self, uri: str) -> str:
        return self.resources.read_resource(uri)

    def close(self) -> None:
        self.client.close()


def configure_logging(level: str = "INFO") -> None:
    """Send all log records to stderr; stdout carries protocol frames in stdio mode."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=_LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


# ============================================================================
# Main Entry Points
# ============================================================================


async def main_stdio(gateway: WebCenterMCPGateway) -> None:
    """Run the MCP server over stdin/stdout (default mode, spawned by MCP clients)."""
    from wcc_mcp.gateway.stdio_transport import build_mcp_server

    server = build_mcp_server(gateway)
    _gateway_log.info("server_start mode=stdio tools=%d", len(gateway.registry))
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main_http(gateway: WebCenterMCPGateway, config: ServerConfig) -> None:
    """Run the MCP server as a single-endpoint JSON-RPC HTTP service."""
    import uvicorn

    from wcc_mcp.gateway.http_app import create_app

    app = create_app(gateway, config)
    print(f"Starting {SERVER_TITLE} HTTP server on {config.host}:{config.port}", file=sys.stderr)
    print(f"MCP endpoint: http://{config.host}:{config.port}/mcp", file=sys.stderr)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webcenter-mcp-server",
        description="WebCenter Content MCP Server",
    )
    parser.add_argument(
        "--mode",
        choices=list(MODES),
        default=None,
        help="Server mode: stdio (default, for MCP clients that spawn the server) or http",
    )
    parser.add_argument(
        "--gui-mode",
        action="store_true",
        help="Run in HTTP mode for a desktop shell (same as ELECTRON_GUI_MODE=true)",
    )
    parser.add_argument("--host", default=None, help="HTTP server host (http mode only)")
    parser.add_argument("--port", type=int, default=None, help="HTTP server port (http mode only)")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level (default INFO, or WCC_MCP_LOG_LEVEL)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        server_config = ServerConfig.from_env(
            mode=args.mode,
            gui_mode=args.gui_mode,
            host=args.host,
            port=args.port,
            log_level=args.log_level,
        )
        configure_logging(server_config.log_level)
        gateway = WebCenterMCPGateway.from_env()
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    try:
        if server_config.mode == "http":
            main_http(gateway, server_config)
        else:
            asyncio.run(main_stdio(gateway))
    except KeyboardInterrupt:
        _gateway_log.info("server_stop reason=interrupt")
    finally:
        gateway.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
