"""Request/response front end: one JSON-RPC object per HTTP POST to ``/mcp``."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wcc_mcp import __version__
from wcc_mcp.errors import ResourceError
from wcc_mcp.gateway.config import ServerConfig
from wcc_mcp.gateway.constants import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    SERVER_NAME,
    SERVER_TITLE,
)
from wcc_mcp.gateway.resources import RESOURCE_MIME_TYPE

if TYPE_CHECKING:
    from wcc_mcp.gateway.server import WebCenterMCPGateway

_http_log = logging.getLogger("wcc_mcp.gateway.http")

RpcHandler = Callable[[Any, dict[str, Any]], Awaitable[dict[str, Any]]]


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _rpc_result(request_id: Any, result: dict[str, Any]) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def _rpc_error(request_id: Any, code: int, message: str, data: Any = None) -> dict[str, Any]:
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": request_id, "error": error}


def _framing_error(code: int, message: str, data: str) -> JSONResponse:
    _http_log.warning("framing_error code=%s error=%s", code, data, extra={"rpc_code": code})
    return JSONResponse(status_code=500, content=_rpc_error(None, code, message, data))


def create_app(gateway: "WebCenterMCPGateway", config: ServerConfig | None = None) -> FastAPI:
    """Build the FastAPI application serving ``gateway`` over HTTP."""
    config = config if config is not None else ServerConfig(mode="http")
    app = FastAPI(title=SERVER_TITLE, version=__version__)

    origins = list(config.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    async def _rpc_initialize(request_id: Any, params: dict[str, Any]) -> dict[str, Any]:
        return _rpc_result(request_id, gateway.initialize(params))

    async def _rpc_ping(request_id: Any, params: dict[str, Any]) -> dict[str, Any]:
        _ = params
        return _rpc_result(request_id, {})

    async def _rpc_tools_list(request_id: Any, params: dict[str, Any]) -> dict[str, Any]:
        _ = params
        return _rpc_result(request_id, {"tools": gateway.list_tools()})

    async def _rpc_tools_call(request_id: Any, params: dict[str, Any]) -> dict[str, Any]:
        tool_name = params.get("name")
        if not isinstance(tool_name, str) or not tool_name:
            return _rpc_error(request_id, INVALID_PARAMS, "Missing required param: name")
        arguments = params.get("arguments")
        result = await run_in_threadpool(gateway.call_tool, tool_name, arguments)
        return _rpc_result(request_id, result.to_dict())

    async def _rpc_resources_list(request_id: Any, params: dict[str, Any]) -> dict[str, Any]:
        _ = params
        return _rpc_result(request_id, {"resources": gateway.list_resources()})

    async def _rpc_resources_read(request_id: Any, params: dict[str, Any]) -> dict[str, Any]:
        uri = params.get("uri")
        if not isinstance(uri, str) or not uri:
            return _rpc_error(request_id, INVALID_PARAMS, "Missing required param: uri")
        try:
            text = await run_in_threadpool(gateway.read_resource, uri)
        except ResourceError as e:
            return _rpc_error(request_id, INTERNAL_ERROR, "Resource read failed", str(e))
        return _rpc_result(
            request_id,
            {"contents": [{"uri": uri, "mimeType": RESOURCE_MIME_TYPE, "text": text}]},
        )

    rpc_handlers: dict[str, RpcHandler] = {
        "initialize": _rpc_initialize,
        "ping": _rpc_ping,
        "tools/list": _rpc_tools_list,
        "tools/call": _rpc_tools_call,
        "resources/list": _rpc_resources_list,
        "resources/read": _rpc_resources_read,
    }

    async def _dispatch_mcp_rpc(body: dict[str, Any]) -> dict[str, Any]:
        """Dispatch one JSON-RPC request body to its handler."""
        method = body.get("method")
        request_id = body.get("id")
        if not isinstance(method, str) or method == "":
            return _rpc_error(request_id, INVALID_REQUEST, "Invalid Request: missing method")

        _http_log.info("mcp_request method=%s", method, extra={"method": method})
        if method.startswith("notifications/"):
            return _rpc_result(request_id, {})

        handler = rpc_handlers.get(method)
        if handler is None:
            return _rpc_error(request_id, METHOD_NOT_FOUND, f"Method not found: {method}")

        params = body.get("params")
        params_dict = params if isinstance(params, dict) else {}
        try:
            return await handler(request_id, params_dict)
        except Exception as e:
            _http_log.exception("rpc_error method=%s", method, extra={"method": method})
            return _rpc_error(request_id, INTERNAL_ERROR, str(e) or type(e).__name__)

    @app.post("/mcp")
    async def mcp_endpoint(request: Request) -> Any:
        """MCP protocol endpoint: one JSON-RPC request object per POST."""
        try:
            body = await request.json()
        except ValueError as e:
            return _framing_error(PARSE_ERROR, "Parse error", str(e))
        if not isinstance(body, dict):
            return _framing_error(
                INVALID_REQUEST, "Invalid Request", "Request body must be a JSON object"
            )
        return await _dispatch_mcp_rpc(body)

    @app.get("/mcp")
    async def mcp_info() -> dict[str, Any]:
        """Static description of the endpoint (not part of the tool protocol)."""
        return {
            "name": SERVER_NAME,
            "title": SERVER_TITLE,
            "version": __version__,
            "protocol": "MCP JSON-RPC over HTTP POST",
            "endpoints": {
                "mcp": "POST /mcp",
                "health": "GET /health",
                "status": "GET /status",
            },
            "methods": sorted(rpc_handlers),
            "timestamp": _timestamp(),
        }

    @app.get("/health")
    async def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "server": SERVER_NAME,
            "port": config.port,
            "timestamp": _timestamp(),
        }

    @app.get("/status")
    async def status() -> dict[str, Any]:
        return {
            "running": True,
            "mode": config.mode,
            "port": config.port,
            "capabilities": ["tools", "resources"],
        }

    return app
