"""Tests for startup wiring: gateway facade and the command-line entry point."""

import subprocess
import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from fake_client import RecordingClient

from wcc_mcp.gateway import server as gateway_server
from wcc_mcp.gateway.server import WebCenterMCPGateway

REPO_ROOT = Path(__file__).resolve().parents[1]

CREDENTIALS = {
    "WCC_BASE_URL": "https://wcc.example.com/documents/wcc/api/v1.1",
    "WCC_USER": "weblogic",
    "WCC_PASSWORD": "s3cret",
}


@pytest.fixture
def credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    for key, value in CREDENTIALS.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("ELECTRON_GUI_MODE", raising=False)


@pytest.fixture(autouse=True)
def quiet_logging():
    with patch.object(gateway_server, "configure_logging") as configure:
        yield configure


class TestGatewayFacade:
    def test_lists_catalog_and_resources(self) -> None:
        gateway = WebCenterMCPGateway(RecordingClient())  # type: ignore[arg-type]
        assert len(gateway.list_tools()) == 56
        assert len(gateway.list_resources()) == 3

    def test_initialize_payload(self) -> None:
        payload = WebCenterMCPGateway(RecordingClient()).initialize({})  # type: ignore[arg-type]
        assert payload["serverInfo"]["name"] == "webcenter-content-mcp-server"
        assert payload["serverInfo"]["version"] == "1.0.0"

    def test_close_closes_client(self) -> None:
        client = RecordingClient()
        WebCenterMCPGateway(client).close()  # type: ignore[arg-type]
        assert client.closed is True

    def test_from_env_requires_credentials(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in CREDENTIALS:
            monkeypatch.delenv(key, raising=False)
        with pytest.raises(gateway_server.ConfigurationError):
            WebCenterMCPGateway.from_env()


class TestMain:
    def test_missing_credentials_exit_code(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        for key in CREDENTIALS:
            monkeypatch.delenv(key, raising=False)

        assert gateway_server.main(["--mode", "stdio"]) == 1
        captured = capsys.readouterr()
        assert "WebCenter Content base URL is required" in captured.err
        assert captured.out == ""

    def test_stdio_is_default(self, credentials: None) -> None:
        with patch.object(gateway_server, "main_stdio", new=AsyncMock()) as run_stdio:
            assert gateway_server.main([]) == 0
        run_stdio.assert_awaited_once()
        gateway = run_stdio.await_args.args[0]
        assert isinstance(gateway, WebCenterMCPGateway)

    def test_http_mode_starts_uvicorn(self, credentials: None) -> None:
        with patch("uvicorn.run") as run:
            assert gateway_server.main(["--mode", "http", "--port", "4555"]) == 0
        kwargs = run.call_args.kwargs
        assert kwargs["port"] == 4555
        assert kwargs["host"] == "0.0.0.0"

    def test_gui_mode_selects_http(self, credentials: None) -> None:
        with patch.object(gateway_server, "main_http") as run_http:
            assert gateway_server.main(["--gui-mode"]) == 0
        config = run_http.call_args.args[1]
        assert config.mode == "http"
        assert config.port == 3999

    def test_interrupt_exits_cleanly(self, credentials: None) -> None:
        with (
            patch.object(gateway_server, "main_http", side_effect=KeyboardInterrupt),
            patch.object(gateway_server.WebCenterContentClient, "close") as close,
        ):
            assert gateway_server.main(["--mode", "http"]) == 0
        close.assert_called_once()

    def test_log_level_flag(self, credentials: None, quiet_logging) -> None:
        with patch.object(gateway_server, "main_stdio", new=AsyncMock()):
            gateway_server.main(["--log-level", "debug"])
        quiet_logging.assert_called_once_with("DEBUG")


class TestPackaging:
    def test_client_imports_before_gateway(self) -> None:
        result = subprocess.run(
            [sys.executable, "-c", "import wcc_mcp.client.webcenter, wcc_mcp.gateway.server"],
            cwd=REPO_ROOT,
            capture_output=True,
            text=True,
            check=False,
        )
        assert result.returncode == 0, result.stderr

    def test_mcp_dependency_stays_on_1x(self) -> None:
        tomllib = pytest.importorskip("tomllib")
        project = tomllib.loads((REPO_ROOT / "pyproject.toml").read_text())["project"]
        mcp_requirement = next(
            dep for dep in project["dependencies"] if dep.split(">")[0].split("<")[0] == "mcp"
        )
        assert "<2" in mcp_requirement
