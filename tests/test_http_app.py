"""Tests for the HTTP front end (single JSON-RPC endpoint)."""

import json
from pathlib import Path

import pytest

pytest.importorskip("fastapi")
pytest.importorskip("httpx")

from fake_client import RecordingClient
from fastapi.testclient import TestClient
from mcp.types import LATEST_PROTOCOL_VERSION

from wcc_mcp.gateway.config import ServerConfig
from wcc_mcp.gateway.http_app import create_app
from wcc_mcp.gateway.server import WebCenterMCPGateway


@pytest.fixture
def backend() -> RecordingClient:
    return RecordingClient()


@pytest.fixture
def http(backend: RecordingClient) -> TestClient:
    gateway = WebCenterMCPGateway(backend)  # type: ignore[arg-type]
    return TestClient(create_app(gateway, ServerConfig(mode="http", port=4321)))


def _rpc(http: TestClient, method: str, params: dict | None = None, request_id: int = 1) -> dict:
    body: dict = {"jsonrpc": "2.0", "method": method, "id": request_id}
    if params is not None:
        body["params"] = params
    response = http.post("/mcp", json=body)
    assert response.status_code == 200
    return response.json()


class TestInitialize:
    def test_initialize_without_jsonrpc_field(self, http: TestClient) -> None:
        response = http.post("/mcp", json={"method": "initialize", "id": 1})

        assert response.status_code == 200
        payload = response.json()
        assert payload["id"] == 1
        assert payload["result"]["protocolVersion"] == LATEST_PROTOCOL_VERSION
        assert payload["result"]["serverInfo"]["name"] == "webcenter-content-mcp-server"
        assert payload["result"]["capabilities"] == {"tools": {}, "resources": {}}

    def test_initialize_echoes_supported_version(self, http: TestClient) -> None:
        payload = _rpc(http, "initialize", {"protocolVersion": "2024-11-05"})
        assert payload["result"]["protocolVersion"] == "2024-11-05"

    def test_initialize_unknown_version_gets_latest(self, http: TestClient) -> None:
        payload = _rpc(http, "initialize", {"protocolVersion": "1999-01-01"})
        assert payload["result"]["protocolVersion"] == LATEST_PROTOCOL_VERSION

    def test_ping_and_notifications(self, http: TestClient) -> None:
        assert _rpc(http, "ping")["result"] == {}
        assert _rpc(http, "notifications/initialized")["result"] == {}


class TestTools:
    def test_tools_list(self, http: TestClient) -> None:
        tools = _rpc(http, "tools/list")["result"]["tools"]
        assert len(tools) == 56
        assert tools[4]["name"] == "search-documents"
        assert tools[4]["inputSchema"]["required"] == ["query"]

    def test_tools_call_success(self, http: TestClient, backend: RecordingClient) -> None:
        payload = _rpc(
            http, "tools/call", {"name": "search-documents", "arguments": {"query": "*"}}, 7
        )

        assert payload["id"] == 7
        assert "isError" not in payload["result"]
        content = payload["result"]["content"]
        assert content[0]["type"] == "text"
        assert json.loads(content[0]["text"])["limit"] == 10
        assert backend.call_count == 1

    def test_tools_call_failure_is_http_200(
        self, http: TestClient, backend: RecordingClient
    ) -> None:
        payload = _rpc(http, "tools/call", {"name": "get-document-metadata", "arguments": {}})

        assert payload["result"]["isError"] is True
        assert "dDocName" in payload["result"]["content"][0]["text"]
        assert backend.call_count == 0

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_tools_call_non_finite_number_rejected(
        self, http: TestClient, backend: RecordingClient, literal: str
    ) -> None:
        body = (
            '{"jsonrpc": "2.0", "id": 1, "method": "tools/call", "params": '
            '{"name": "search-documents", "arguments": {"query": "*", "limit": %s}}}' % literal
        )
        response = http.post(
            "/mcp", content=body.encode(), headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 200
        result = response.json()["result"]
        assert result["isError"] is True
        assert result["content"][0]["text"] == (
            "Error executing tool search-documents: Invalid argument limit: expected number"
        )
        assert backend.call_count == 0

    def test_tools_call_unknown_tool(self, http: TestClient) -> None:
        payload = _rpc(http, "tools/call", {"name": "not-a-real-tool"})
        assert payload["result"]["isError"] is True
        assert "Unknown tool: not-a-real-tool" in payload["result"]["content"][0]["text"]

    def test_tools_call_missing_name(self, http: TestClient) -> None:
        payload = _rpc(http, "tools/call", {"arguments": {}})
        assert payload["error"]["code"] == -32602

    def test_download_through_http(self, http: TestClient, tmp_path: Path) -> None:
        output = tmp_path / "out" / "doc.pdf"
        payload = _rpc(
            http,
            "tools/call",
            {
                "name": "download-document",
                "arguments": {"dDocName": "DOC123", "outputPath": str(output)},
            },
        )
        assert payload["result"]["content"][0]["text"] == (
            f"Document downloaded successfully to: {output}"
        )
        assert output.exists()


class TestResources:
    def test_resources_list(self, http: TestClient) -> None:
        resources = _rpc(http, "resources/list")["result"]["resources"]
        assert [r["uri"] for r in resources] == [
            "webcenter://documents",
            "webcenter://folders",
            "webcenter://work-in-progress",
        ]

    def test_resources_read(self, http: TestClient) -> None:
        payload = _rpc(http, "resources/read", {"uri": "webcenter://documents"})
        contents = payload["result"]["contents"]
        assert contents[0]["uri"] == "webcenter://documents"
        assert contents[0]["mimeType"] == "application/json"
        assert json.loads(contents[0]["text"])["limit"] == 20

    def test_resources_read_unknown(self, http: TestClient) -> None:
        payload = _rpc(http, "resources/read", {"uri": "webcenter://nope"})
        assert payload["error"]["code"] == -32603
        assert "Unknown resource: webcenter://nope" in payload["error"]["data"]

    def test_resources_read_missing_uri(self, http: TestClient) -> None:
        assert _rpc(http, "resources/read", {})["error"]["code"] == -32602


class TestFraming:
    def test_unknown_method(self, http: TestClient) -> None:
        payload = _rpc(http, "prompts/list", request_id=3)
        assert payload == {
            "jsonrpc": "2.0",
            "id": 3,
            "error": {"code": -32601, "message": "Method not found: prompts/list"},
        }

    def test_missing_method(self, http: TestClient) -> None:
        response = http.post("/mcp", json={"id": 9})
        assert response.status_code == 200
        assert response.json()["error"]["code"] == -32600

    def test_malformed_json_is_500(self, http: TestClient) -> None:
        response = http.post(
            "/mcp", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 500
        payload = response.json()
        assert payload["id"] is None
        assert payload["error"]["code"] == -32700

    def test_non_object_body_is_500(self, http: TestClient) -> None:
        response = http.post("/mcp", json=[{"method": "ping", "id": 1}])
        assert response.status_code == 500
        assert response.json()["error"]["code"] == -32600


class TestInfoEndpoints:
    def test_get_mcp_metadata(self, http: TestClient) -> None:
        payload = http.get("/mcp").json()
        assert payload["name"] == "webcenter-content-mcp-server"
        assert "tools/call" in payload["methods"]
        assert "timestamp" in payload

    def test_health(self, http: TestClient) -> None:
        payload = http.get("/health").json()
        assert payload["status"] == "healthy"
        assert payload["port"] == 4321

    def test_status(self, http: TestClient) -> None:
        assert http.get("/status").json() == {
            "running": True,
            "mode": "http",
            "port": 4321,
            "capabilities": ["tools", "resources"],
        }

    def test_cors_preflight(self, http: TestClient) -> None:
        response = http.options(
            "/mcp",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
