"""Environment-driven configuration for the gateway and its WebCenter backend."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from dotenv import load_dotenv

from wcc_mcp.errors import ConfigurationError
from wcc_mcp.gateway.constants import (
    DEFAULT_HTTP_HOST,
    DEFAULT_HTTP_PORT,
    DEFAULT_TIMEOUT_SECONDS,
)

load_dotenv()

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})
MODES = ("stdio", "http")


def _env_flag(value: str | None, default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() not in _FALSE_VALUES


@dataclass(frozen=True)
class WebCenterConfig:
    """Connection settings for the remote content server.

    The credential triple is read once at startup; rotating it requires a restart.
    """

    base_url: str
    username: str
    password: str = field(repr=False)
    timeout: float | None = DEFAULT_TIMEOUT_SECONDS
    verify_ssl: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "WebCenterConfig":
        env = os.environ if environ is None else environ
        base_url = env.get("WCC_BASE_URL", "").strip()
        username = env.get("WCC_USER", "").strip()
        password = env.get("WCC_PASSWORD", "")
        if not base_url:
            raise ConfigurationError("WebCenter Content base URL is required (WCC_BASE_URL)")
        if not username:
            raise ConfigurationError("WebCenter Content username is required (WCC_USER)")
        if not password:
            raise ConfigurationError("WebCenter Content password is required (WCC_PASSWORD)")

        raw_timeout = env.get("WCC_TIMEOUT", "").strip()
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ConfigurationError(f"WCC_TIMEOUT must be a number: {raw_timeout}") from e
            if timeout <= 0:
                timeout = None

        return cls(
            base_url=base_url,
            username=username,
            password=password,
            timeout=timeout,
            verify_ssl=_env_flag(env.get("WCC_VERIFY_SSL"), True),
        )


@dataclass(frozen=True)
class ServerConfig:
    """Front-end settings: which transport to run and where to bind it."""

    mode: str = "stdio"
    host: str = DEFAULT_HTTP_HOST
    port: int = DEFAULT_HTTP_PORT
    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ConfigurationError(f"Unsupported server mode: {self.mode}")

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        mode: str | None = None,
        gui_mode: bool = False,
        host: str | None = None,
        port: int | None = None,
        log_level: str | None = None,
    ) -> "ServerConfig":
        """Resolve settings; explicit arguments win over environment variables."""
        env = os.environ if environ is None else environ
        resolved_mode = mode or resolve_mode(env, gui_mode=gui_mode)

        resolved_port = port
        if resolved_port is None:
            raw_port = env.get("MCP_PORT", "").strip()
            try:
                resolved_port = int(raw_port) if raw_port else DEFAULT_HTTP_PORT
            except ValueError as e:
                raise ConfigurationError(f"MCP_PORT must be an integer: {raw_port}") from e

        raw_origins = env.get("MCP_CORS_ORIGINS", "")
        origins = tuple(o.strip() for o in raw_origins.split(",") if o.strip()) or ("*",)

        return cls(
            mode=resolved_mode,
            host=host or env.get("MCP_HOST", "").strip() or DEFAULT_HTTP_HOST,
            port=resolved_port,
            cors_origins=origins,
            log_level=(log_level or env.get("WCC_MCP_LOG_LEVEL", "") or "INFO").upper(),
        )


def resolve_mode(environ: Mapping[str, str], *, gui_mode: bool = False) -> str:
    """Pick the transport when no explicit ``--mode`` was given."""
    if gui_mode or environ.get("ELECTRON_GUI_MODE", "").strip().lower() == "true":
        return "http"
    return "stdio"
